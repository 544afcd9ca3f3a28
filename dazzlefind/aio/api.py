"""High-level async API for DazzleFind.

Async counterparts of dazzlefind.sync, with identical results for the same
filesystem state. Predicates may be plain functions, coroutine functions,
or a mix of both; ``directories`` may additionally be an async iterable.

    await find_all(*predicates)
    await find_all(directories, *predicates)
"""

import logging
from typing import Any, AsyncIterator, List, Optional, Tuple

from .._common.collectors import AllMatchesCollector, OnlyOneCollector
from .._common.config import FinderConfig, resolve_config
from .._common.directories import normalize_directories_async, split_arguments
from .._common.predicates import PredicateChain
from .._common.results import MatchSet
from .core.adapter import AsyncDirectoryAdapter
from .core.traverser import AsyncDirectoryTraverser

logger = logging.getLogger(__name__)


async def _prepare(
    args: Tuple[Any, ...],
    config: Optional[FinderConfig],
    adapter: Optional[AsyncDirectoryAdapter],
) -> Tuple[AsyncDirectoryTraverser, List[str], PredicateChain]:
    config = resolve_config(config)
    directories, predicates = split_arguments(args)
    chain = PredicateChain(predicates)
    traverser = AsyncDirectoryTraverser(adapter, max_concurrent=config.max_concurrent)
    if chain.is_empty:
        logger.debug("No predicates, skipping directory resolution")
        return traverser, [], chain
    roots = await normalize_directories_async(
        directories, config.base_directory, traverser.adapter.resolve_absolute
    )
    return traverser, roots, chain


async def iter_matches(
    *args: Any,
    config: Optional[FinderConfig] = None,
    adapter: Optional[AsyncDirectoryAdapter] = None,
) -> AsyncIterator[str]:
    """Lazily yield matching paths, grouped by root, sorted within a root.

    A path reachable from two roots is yielded twice.

    Example:
        >>> async for path in iter_matches(["src", "tests"], of_glob("*.py")):
        ...     print(path)
    """
    traverser, roots, chain = await _prepare(args, config, adapter)
    matches = traverser.traverse(roots, chain)
    try:
        async for path in matches:
            yield path
    finally:
        await matches.aclose()


async def find_all(
    *args: Any,
    config: Optional[FinderConfig] = None,
    adapter: Optional[AsyncDirectoryAdapter] = None,
) -> MatchSet:
    """Find every entry of the given directories that passes all predicates.

    Args:
        *args: Optional directory specification followed by predicates
        config: Per-call configuration
        adapter: Directory source (local filesystem if None)

    Returns:
        MatchSet of absolute paths in ascending order; empty when there are
        no predicates or no directories

    Raises:
        InvalidRootError: If any root is missing or not a directory
        Exception: Whatever a predicate raised, unchanged
    """
    traverser, roots, chain = await _prepare(args, config, adapter)
    collector = AllMatchesCollector()

    async for path in traverser.traverse(roots, chain):
        collector.add(path)

    matches = collector.result()
    logger.debug("find_all: %d matches in %d roots", len(matches), len(roots))
    return matches


async def find_only_one(
    *args: Any,
    config: Optional[FinderConfig] = None,
    adapter: Optional[AsyncDirectoryAdapter] = None,
) -> Optional[str]:
    """Find the single entry that passes all predicates.

    Stops pulling from the traverser as soon as a second distinct match
    turns up.

    Returns:
        The matching absolute path, or None if nothing matches

    Raises:
        MultipleMatchError: If two distinct paths match
        InvalidRootError: If any root is missing or not a directory
        Exception: Whatever a predicate raised, unchanged
    """
    traverser, roots, chain = await _prepare(args, config, adapter)
    collector = OnlyOneCollector()

    matches = traverser.traverse(roots, chain)
    try:
        async for path in matches:
            collector.add(path)
    finally:
        await matches.aclose()

    match = collector.result()
    logger.debug("find_only_one: %s", match)
    return match
