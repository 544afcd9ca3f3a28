"""Asynchronous implementation of DazzleFind.

This package contains native async/await implementations of the finders.
Root directories are listed with overlapping I/O; results are identical to
the blocking implementation in dazzlefind.sync.
"""

# Core abstractions
from .core import (
    AsyncDirectoryAdapter,
    AsyncDirectoryTraverser,
)

# Adapters
from .adapters import AsyncFileSystemAdapter

# Configuration (re-exported from _common)
from .config import FinderConfig

# High-level API
from .api import (
    iter_matches,
    find_all,
    find_only_one,
)

__all__ = [
    # Core abstractions
    'AsyncDirectoryAdapter',
    'AsyncDirectoryTraverser',
    # Adapters
    'AsyncFileSystemAdapter',
    # Configuration
    'FinderConfig',
    # High-level API
    'iter_matches',
    'find_all',
    'find_only_one',
]
