"""DazzleFind - Predicate-driven file finder.

DazzleFind locates the files and directories directly inside a set of root
directories whose paths pass a chain of predicates. It either collects
every match or insists on at most one.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from dazzlefind.sync import find_all_sync, find_only_one_sync

Asynchronous:
    from dazzlefind.aio import find_all, find_only_one
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations give identical results for the same filesystem state.
The four finders are also re-exported here for convenience.
"""

import logging

__version__ = "0.1.0"

# Library code never configures logging; applications opt in.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import sync
from . import aio
from ._common.config import FinderConfig
from ._common.results import MatchSet
from .aio.api import find_all, find_only_one
from .sync.api import find_all_sync, find_only_one_sync
from .errors import (
    FinderError,
    InvalidRootError,
    RootNotFoundError,
    RootNotADirectoryError,
    PredicateSuspendedError,
    MultipleMatchError,
)
from .matchers import of_basename, of_glob, all_of, any_of

__all__ = [
    "__version__",
    "sync",
    "aio",
    # Finders
    "find_all",
    "find_all_sync",
    "find_only_one",
    "find_only_one_sync",
    # Results and configuration
    "MatchSet",
    "FinderConfig",
    # Errors
    "FinderError",
    "InvalidRootError",
    "RootNotFoundError",
    "RootNotADirectoryError",
    "PredicateSuspendedError",
    "MultipleMatchError",
    # Predicates
    "of_basename",
    "of_glob",
    "all_of",
    "any_of",
]
