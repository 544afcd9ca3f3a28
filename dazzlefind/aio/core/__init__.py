"""Core abstractions for async directory search.

All components use async/await patterns for non-blocking I/O.
"""

from .adapter import AsyncDirectoryAdapter
from .traverser import AsyncDirectoryTraverser

__all__ = [
    'AsyncDirectoryAdapter',
    'AsyncDirectoryTraverser',
]
