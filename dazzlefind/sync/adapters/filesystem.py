"""Filesystem adapter for the blocking finders.

Lists directories with os.listdir and validates roots with os.stat, both
of which follow symbolic links.
"""

import logging
import os
import stat as stat_module  # To avoid name collision with stat results
from typing import List

from ..core.adapter import DirectoryAdapter
from ...errors import RootNotFoundError, RootNotADirectoryError

logger = logging.getLogger(__name__)


def validate_root(directory: str) -> None:
    """Check that directory exists and is a directory.

    Links are followed, so a symlink to a directory is a valid root and a
    dangling symlink is reported as missing.

    Raises:
        RootNotFoundError: If nothing exists at directory
        RootNotADirectoryError: If directory is a file or other non-directory
    """
    try:
        stat = os.stat(directory)
    except (FileNotFoundError, NotADirectoryError) as error:
        raise RootNotFoundError(directory) from error

    if not stat_module.S_ISDIR(stat.st_mode):
        raise RootNotADirectoryError(directory)


def scan_directory(directory: str) -> List[str]:
    """Validate directory and return the absolute paths of its entries.

    Entry names come straight from os.listdir, so links (even dangling
    ones) are listed at their own location rather than at their target.
    """
    validate_root(directory)
    try:
        names = os.listdir(directory)
    except FileNotFoundError as error:
        # Removed between the stat and the listing
        raise RootNotFoundError(directory) from error
    except NotADirectoryError as error:
        raise RootNotADirectoryError(directory) from error

    logger.debug("Listed %d entries in %s", len(names), directory)
    return [os.path.join(directory, name) for name in names]


class FileSystemAdapter(DirectoryAdapter):
    """Directory adapter backed by the local filesystem."""

    def list_entries(self, directory: str) -> List[str]:
        """List the immediate entries of directory.

        Args:
            directory: Absolute path of the root directory

        Returns:
            Absolute entry paths in listing order (unsorted)
        """
        return scan_directory(directory)

    def __repr__(self) -> str:
        return "FileSystemAdapter()"
