"""Configuration system for DazzleFind.

Finders are configured per call; nothing here is process-wide state.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FinderConfig:
    """Per-call settings shared by the sync and async finders.

    Attributes:
        max_concurrent: Maximum number of root directories the async
            finders validate and list at the same time. Ignored by the
            blocking finders.
        cwd: Directory that relative roots are resolved against. None means
            the process working directory at the time of the call.
    """

    max_concurrent: int = 100
    cwd: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.max_concurrent, int) or self.max_concurrent < 1:
            raise ValueError(
                f"max_concurrent must be a positive integer, got {self.max_concurrent!r}"
            )
        if self.cwd is not None and not os.path.isabs(os.fspath(self.cwd)):
            raise ValueError(f"cwd must be an absolute path, got {self.cwd!r}")

    @property
    def base_directory(self) -> Optional[str]:
        """cwd as a str, or None to defer to the process working directory."""
        if self.cwd is None:
            return None
        return os.fspath(self.cwd)


DEFAULT_CONFIG = FinderConfig()


def resolve_config(config: Optional[FinderConfig]) -> FinderConfig:
    """Return config, or the default configuration when None."""
    if config is None:
        return DEFAULT_CONFIG
    if not isinstance(config, FinderConfig):
        raise TypeError(f"config must be a FinderConfig, got {type(config).__name__}")
    return config
