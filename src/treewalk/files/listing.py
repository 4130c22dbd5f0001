"""Directory listing."""

import logging
import os
from pathlib import Path

from treewalk.exceptions import NotDirectoryError
from treewalk.exceptions import NotFoundError
from treewalk.exceptions import PermissionDeniedError
from treewalk.exceptions import TraversalError

logger = logging.getLogger(__name__)


def list_directory(working_path: Path) -> list[str]:
    """List the immediate entry names of a directory.

    Args:
        working_path: Directory to list

    Returns:
        Entry names in the order the operating system returns them. Not
        sorted, but stable for an unchanged directory.

    Raises:
        NotFoundError: If working_path does not exist
        NotDirectoryError: If working_path is not a directory
        PermissionDeniedError: If working_path cannot be read
        TraversalError: For any other listing failure
    """
    try:
        names = os.listdir(working_path)
    except FileNotFoundError as e:
        raise NotFoundError(working_path, e) from e
    except NotADirectoryError as e:
        raise NotDirectoryError(working_path, e) from e
    except PermissionError as e:
        raise PermissionDeniedError(working_path, e) from e
    except OSError as e:
        raise TraversalError(working_path, e) from e

    logger.debug("Listed %d entries in %s", len(names), working_path)
    return names
