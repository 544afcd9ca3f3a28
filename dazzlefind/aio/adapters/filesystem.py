"""Async filesystem adapter.

The os module has no native async directory API, so each blocking call
runs in the default executor through asyncio.to_thread. Both calls follow
symbolic links.
"""

import asyncio
import logging
import os
import stat as stat_module  # To avoid name collision with stat results
from typing import List

from ..core.adapter import AsyncDirectoryAdapter
from ...errors import RootNotFoundError, RootNotADirectoryError

logger = logging.getLogger(__name__)


class AsyncFileSystemAdapter(AsyncDirectoryAdapter):
    """Async directory adapter backed by the local filesystem."""

    async def validate_root(self, directory: str) -> None:
        """Check that directory exists and is a directory.

        Raises:
            RootNotFoundError: If nothing exists at directory (or only a
                dangling symlink does)
            RootNotADirectoryError: If directory is a file or other
                non-directory
        """
        try:
            stat = await asyncio.to_thread(os.stat, directory)
        except (FileNotFoundError, NotADirectoryError) as error:
            raise RootNotFoundError(directory) from error

        if not stat_module.S_ISDIR(stat.st_mode):
            raise RootNotADirectoryError(directory)

    async def list_entries(self, directory: str) -> List[str]:
        """Validate directory and list its immediate entries.

        Args:
            directory: Absolute path of the root directory

        Returns:
            Absolute entry paths in listing order (unsorted)
        """
        await self.validate_root(directory)
        try:
            names = await asyncio.to_thread(os.listdir, directory)
        except FileNotFoundError as error:
            # Removed between the stat and the listing
            raise RootNotFoundError(directory) from error
        except NotADirectoryError as error:
            raise RootNotADirectoryError(directory) from error

        logger.debug("Listed %d entries in %s", len(names), directory)
        return [os.path.join(directory, name) for name in names]

    def __repr__(self) -> str:
        return "AsyncFileSystemAdapter()"
