"""Directory adapters for the blocking finders."""

from .filesystem import FileSystemAdapter, scan_directory, validate_root

__all__ = [
    'FileSystemAdapter',
    'scan_directory',
    'validate_root',
]
