"""Blocking traversal engine for DazzleFind.

The traverser walks the immediate entries of each root directory (never
recursing), evaluates the predicate chain against every entry and yields
the paths that pass.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence

from ..._common.predicates import PredicateChain
from ..adapters.filesystem import FileSystemAdapter
from .adapter import DirectoryAdapter

logger = logging.getLogger(__name__)


class DirectoryTraverser:
    """Yields matching entries of a sequence of root directories.

    Traversal runs in two phases. First every root is validated and listed,
    in input order, so one missing or non-directory root fails the call
    before any predicate is evaluated. Then each root's entries are sorted
    and filtered; matches come out grouped by root in input order, ascending
    within a root.

    The output is a lazy iterator: callers that stop pulling (such as the
    single-match finder) leave the remaining entries unevaluated.
    """

    def __init__(self, adapter: Optional[DirectoryAdapter] = None):
        """Initialize traverser.

        Args:
            adapter: Source of directory listings (local filesystem if None)
        """
        self.adapter = adapter if adapter is not None else FileSystemAdapter()

    def list_roots(self, directories: Sequence[str]) -> List[List[str]]:
        """Validate and list every root, returning sorted entries per root.

        A root that appears several times is listed once per call.

        Raises:
            InvalidRootError: For the first invalid root in input order
        """
        listings: Dict[str, List[str]] = {}
        for directory in directories:
            if directory not in listings:
                listings[directory] = sorted(self.adapter.list_entries(directory))
        return [listings[directory] for directory in directories]

    def traverse(self, directories: Sequence[str], chain: PredicateChain) -> Iterator[str]:
        """Yield entries of directories that pass chain.

        Args:
            directories: Absolute root paths, in search order
            chain: Predicates every yielded path must satisfy

        Yields:
            Absolute paths of matching entries

        Raises:
            InvalidRootError: If a root is missing or not a directory
            Exception: Whatever a predicate raised, unchanged
        """
        if not directories or chain.is_empty:
            logger.debug(
                "Nothing to search (%d roots, %d predicates)", len(directories), len(chain)
            )
            return

        listings = self.list_roots(directories)

        for directory, entries in zip(directories, listings):
            logger.debug("Filtering %d entries of %s", len(entries), directory)
            for path in entries:
                result = chain.evaluate_sync(path)
                if result.errored:
                    result.unwrap()
                if result.passed:
                    yield path
