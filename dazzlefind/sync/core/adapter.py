"""DirectoryAdapter abstraction for the blocking finders.

The adapter is the only piece of DazzleFind that touches the filesystem.
Traversers ask it to validate and list root directories; everything else
(predicates, ordering, aggregation) stays independent of where the entries
come from, which also lets tests plug in an in-memory tree.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..._common.directories import resolve_absolute


class DirectoryAdapter(ABC):
    """Abstract adapter for listing the immediate entries of a directory."""

    def resolve_absolute(self, path: str, cwd: Optional[str] = None) -> str:
        """Resolve path against cwd into an absolute, normalized path.

        Args:
            path: Possibly relative path
            cwd: Base directory (process working directory when None)

        Returns:
            Absolute path string
        """
        return resolve_absolute(path, cwd)

    @abstractmethod
    def list_entries(self, directory: str) -> List[str]:
        """List the immediate entries of a root directory.

        Symbolic links are followed: a link to a directory can be used as a
        root, and links inside the directory are listed at their own
        location.

        Args:
            directory: Absolute path of the directory

        Returns:
            Absolute paths of the entries, in no particular order

        Raises:
            RootNotFoundError: If the directory does not exist
            RootNotADirectoryError: If the path exists but is not a directory
        """
        pass
