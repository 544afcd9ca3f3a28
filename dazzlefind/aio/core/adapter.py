"""Async directory adapter abstraction.

Defines how the async finders obtain directory listings. Implementations
may suspend while listing; the traverser decides how many listings run at
once.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..._common.directories import resolve_absolute


class AsyncDirectoryAdapter(ABC):
    """Abstract base class for async directory adapters.

    Adapters bridge between the search engine and a concrete source of
    directory entries, normally the local filesystem.
    """

    def resolve_absolute(self, path: str, cwd: Optional[str] = None) -> str:
        """Resolve path against cwd into an absolute, normalized path.

        Resolution is pure string work, so it stays synchronous.
        """
        return resolve_absolute(path, cwd)

    @abstractmethod
    async def list_entries(self, directory: str) -> List[str]:
        """List the immediate entries of a root directory.

        Args:
            directory: Absolute path of the directory

        Returns:
            Absolute paths of the entries, in no particular order

        Raises:
            RootNotFoundError: If the directory does not exist
            RootNotADirectoryError: If the path exists but is not a directory
        """
        pass

