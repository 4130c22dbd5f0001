"""Entry classification."""

import logging
import stat
from pathlib import Path

from treewalk.exceptions import ClassificationError
from treewalk.models import EntryKind

logger = logging.getLogger(__name__)


def classify(working_path: Path) -> EntryKind:
    """Classify a directory entry by its metadata.

    Symlinks are followed, so a link to a directory is a DIRECTORY and a link
    to a file is a FILE. A symlink that cannot be followed (missing target or
    a loop) is OTHER.

    Args:
        working_path: Entry to classify

    Returns:
        EntryKind of the entry

    Raises:
        ClassificationError: If the entry cannot be stat'ed (e.g. removed
            after it was listed)
    """
    try:
        mode = working_path.stat().st_mode
    except OSError as e:
        if _is_broken_symlink(working_path):
            logger.debug("Skipping broken symlink %s (%s)", working_path, e.strerror)
            return EntryKind.OTHER
        raise ClassificationError(working_path, e) from e

    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def _is_broken_symlink(working_path: Path) -> bool:
    """Check if working_path is itself a symlink, so stat failed on its target."""
    try:
        return stat.S_ISLNK(working_path.lstat().st_mode)
    except OSError:
        return False
