"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration (FinderConfig)
- The predicate chain and its tagged results
- Directory specification normalization
- Result collectors and the MatchSet container

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import FinderConfig, DEFAULT_CONFIG, resolve_config
from .predicates import (
    Predicate,
    SyncPredicate,
    Outcome,
    ChainResult,
    PredicateChain,
)
from .directories import (
    DirectorySpec,
    resolve_absolute,
    normalize_directories,
    normalize_directories_async,
    split_arguments,
)
from .results import MatchSet
from .collectors import (
    MatchCollector,
    AllMatchesCollector,
    OnlyOneCollector,
)

__all__ = [
    'FinderConfig',
    'DEFAULT_CONFIG',
    'resolve_config',
    'Predicate',
    'SyncPredicate',
    'Outcome',
    'ChainResult',
    'PredicateChain',
    'DirectorySpec',
    'resolve_absolute',
    'normalize_directories',
    'normalize_directories_async',
    'split_arguments',
    'MatchSet',
    'MatchCollector',
    'AllMatchesCollector',
    'OnlyOneCollector',
]
