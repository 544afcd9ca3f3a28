"""Async traversal engine for DazzleFind.

Root directories are validated and listed concurrently, but predicates are
evaluated one path at a time in the same order the blocking traverser
uses, so both flavours yield identical sequences and surface the same
error for the same filesystem state.
"""

import asyncio
import logging
from typing import AsyncIterator, Dict, List, Optional, Sequence

from ..._common.predicates import PredicateChain
from ..adapters.filesystem import AsyncFileSystemAdapter
from .adapter import AsyncDirectoryAdapter

logger = logging.getLogger(__name__)


class AsyncDirectoryTraverser:
    """Yields matching entries of a sequence of root directories.

    Like the blocking DirectoryTraverser, traversal validates and lists all
    roots before evaluating any predicate, then yields matches grouped by
    root in input order and sorted within each root.
    """

    def __init__(
        self,
        adapter: Optional[AsyncDirectoryAdapter] = None,
        max_concurrent: int = 100,
    ):
        """Initialize traverser.

        Args:
            adapter: Source of directory listings (local filesystem if None)
            max_concurrent: Maximum number of roots listed at the same time
        """
        self.adapter = adapter if adapter is not None else AsyncFileSystemAdapter()
        self.max_concurrent = max_concurrent

    async def list_roots(self, directories: Sequence[str]) -> List[List[str]]:
        """Validate and list every root concurrently.

        A root that appears several times is listed once per call. All
        listings are awaited before any failure is reported, and the failure
        reported is the one of the first invalid root in input order,
        matching the blocking traverser.

        Raises:
            InvalidRootError: For the first invalid root in input order
        """
        semaphore = asyncio.Semaphore(self.max_concurrent)
        unique = list(dict.fromkeys(directories))

        async def _list(directory: str) -> List[str]:
            async with semaphore:
                return sorted(await self.adapter.list_entries(directory))

        results = await asyncio.gather(
            *(_list(directory) for directory in unique),
            return_exceptions=True,
        )

        listings: Dict[str, List[str]] = {}
        for directory, result in zip(unique, results):
            if isinstance(result, BaseException):
                raise result
            listings[directory] = result

        return [listings[directory] for directory in directories]

    async def traverse(
        self,
        directories: Sequence[str],
        chain: PredicateChain,
    ) -> AsyncIterator[str]:
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

        listings = await self.list_roots(directories)

        for directory, entries in zip(directories, listings):
            logger.debug("Filtering %d entries of %s", len(entries), directory)
            for path in entries:
                result = await chain.evaluate(path)
                if result.errored:
                    result.unwrap()
                if result.passed:
                    yield path
