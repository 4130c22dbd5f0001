"""Custom exceptions for treewalk."""

from pathlib import Path


class TreeWalkError(Exception):
    """Base exception for treewalk."""


class TraversalError(TreeWalkError):
    """A directory listing or stat failed and the traversal was aborted."""

    reason = "Traversal failed"

    def __init__(self, path: Path, cause: OSError | None = None):
        self.path = path
        self.cause = cause
        message = f"{self.reason}: {path}"
        if cause is not None and cause.strerror:
            message += f" ({cause.strerror})"
        super().__init__(message)


class NotFoundError(TraversalError):
    """Root or an intermediate directory does not exist."""

    reason = "No such directory"


class NotDirectoryError(TraversalError):
    """Path was expected to be a directory but is not."""

    reason = "Not a directory"


class PermissionDeniedError(TraversalError):
    """Directory could not be listed due to permissions."""

    reason = "Permission denied"


class ClassificationError(TraversalError):
    """Metadata lookup failed for a listed entry."""

    reason = "Cannot stat entry"


class ConfigValidationError(TreeWalkError):
    """Config file is invalid or malformed."""


class ConfigVersionError(TreeWalkError):
    """Config version is unsupported."""
