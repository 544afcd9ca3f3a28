"""Configuration for async operations.

Re-exports configuration from _common for consistency.
"""

from .._common.config import FinderConfig, DEFAULT_CONFIG, resolve_config

__all__ = [
    'FinderConfig',
    'DEFAULT_CONFIG',
    'resolve_config',
]
