"""Configuration re-export for the blocking finders.

Re-exports configuration components from the _common package.
"""

from .._common.config import FinderConfig, DEFAULT_CONFIG, resolve_config

__all__ = [
    'FinderConfig',
    'DEFAULT_CONFIG',
    'resolve_config',
]
