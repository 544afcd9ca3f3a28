"""Core abstractions for blocking directory search."""

from .adapter import DirectoryAdapter
from .traverser import DirectoryTraverser

__all__ = [
    'DirectoryAdapter',
    'DirectoryTraverser',
]
