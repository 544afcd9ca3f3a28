"""Synchronous implementation of DazzleFind.

All components here operate in a blocking, synchronous manner: directory
listings and predicate calls happen on the caller's thread, and errors are
raised straight to the caller.
"""

# Core components
from .core.adapter import DirectoryAdapter
from .core.traverser import DirectoryTraverser

# Adapters
from .adapters.filesystem import FileSystemAdapter

# Configuration
from .config import FinderConfig

# High-level API
from .api import (
    iter_matches_sync,
    find_all_sync,
    find_only_one_sync,
)

__all__ = [
    # Core
    'DirectoryAdapter',
    'DirectoryTraverser',
    # Adapters
    'FileSystemAdapter',
    # Config
    'FinderConfig',
    # API
    'iter_matches_sync',
    'find_all_sync',
    'find_only_one_sync',
]
