"""High-level blocking API for DazzleFind.

Every function accepts the same arguments:

    find_all_sync(*predicates)
    find_all_sync(directories, *predicates)

``directories`` is None (the working directory), one path, or an iterable
of paths. It may be omitted when the first argument is already a
predicate. Predicates receive an absolute path string and return a truthy
value to keep it; they must be synchronous.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from .._common.collectors import AllMatchesCollector, OnlyOneCollector
from .._common.config import FinderConfig, resolve_config
from .._common.directories import normalize_directories, split_arguments
from .._common.predicates import PredicateChain
from .._common.results import MatchSet
from .core.adapter import DirectoryAdapter
from .core.traverser import DirectoryTraverser

logger = logging.getLogger(__name__)


def _prepare(
    args: Tuple[Any, ...],
    config: Optional[FinderConfig],
    adapter: Optional[DirectoryAdapter],
) -> Tuple[DirectoryTraverser, List[str], PredicateChain]:
    config = resolve_config(config)
    directories, predicates = split_arguments(args)
    chain = PredicateChain(predicates)
    traverser = DirectoryTraverser(adapter)
    if chain.is_empty:
        logger.debug("No predicates, skipping directory resolution")
        return traverser, [], chain
    roots = normalize_directories(
        directories, config.base_directory, traverser.adapter.resolve_absolute
    )
    return traverser, roots, chain


def iter_matches_sync(
    *args: Any,
    config: Optional[FinderConfig] = None,
    adapter: Optional[DirectoryAdapter] = None,
) -> Iterator[str]:
    """Lazily yield matching paths, grouped by root, sorted within a root.

    Unlike find_all_sync, a path reachable from two roots is yielded twice,
    and matches produced before an error has been raised are already in the
    caller's hands.

    Raises:
        InvalidRootError: If a root is missing or not a directory
    """
    traverser, roots, chain = _prepare(args, config, adapter)
    yield from traverser.traverse(roots, chain)


def find_all_sync(
    *args: Any,
    config: Optional[FinderConfig] = None,
    adapter: Optional[DirectoryAdapter] = None,
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
        PredicateSuspendedError: If a predicate returned an awaitable
        Exception: Whatever a predicate raised, unchanged

    Example:
        >>> find_all_sync("docs", of_basename(re.compile(r"\\.md$")))
        MatchSet(['/project/docs/index.md', '/project/docs/usage.md'])
    """
    traverser, roots, chain = _prepare(args, config, adapter)
    collector = AllMatchesCollector()

    for path in traverser.traverse(roots, chain):
        collector.add(path)

    matches = collector.result()
    logger.debug("find_all_sync: %d matches in %d roots", len(matches), len(roots))
    return matches


def find_only_one_sync(
    *args: Any,
    config: Optional[FinderConfig] = None,
    adapter: Optional[DirectoryAdapter] = None,
) -> Optional[str]:
    """Find the single entry that passes all predicates.

    Traversal stops as soon as a second distinct match turns up.

    Args:
        *args: Optional directory specification followed by predicates
        config: Per-call configuration
        adapter: Directory source (local filesystem if None)

    Returns:
        The matching absolute path, or None if nothing matches

    Raises:
        MultipleMatchError: If two distinct paths match
        InvalidRootError: If any root is missing or not a directory
        PredicateSuspendedError: If a predicate returned an awaitable
        Exception: Whatever a predicate raised, unchanged
    """
    traverser, roots, chain = _prepare(args, config, adapter)
    collector = OnlyOneCollector()

    matches = traverser.traverse(roots, chain)
    try:
        for path in matches:
            collector.add(path)
    finally:
        matches.close()

    match = collector.result()
    logger.debug("find_only_one_sync: %s", match)
    return match
