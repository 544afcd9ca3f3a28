"""Result collectors for DazzleFind.

Collectors fold the paths yielded by a traverser into the value a finder
returns. They hold no I/O of their own, so the sync and async finders
share them.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..errors import MultipleMatchError
from .results import MatchSet

logger = logging.getLogger(__name__)


class MatchCollector(ABC):
    """Abstract base class for match collection strategies."""

    @abstractmethod
    def add(self, path: str) -> None:
        """Record one matching path.

        Args:
            path: Absolute path that passed every predicate
        """
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return the collected value."""
        pass


class AllMatchesCollector(MatchCollector):
    """Collects every match into a deduplicated, sorted MatchSet.

    The same path reached through several roots is kept once.
    """

    def __init__(self):
        self._seen = set()

    def add(self, path: str) -> None:
        self._seen.add(path)

    def result(self) -> MatchSet:
        return MatchSet(self._seen)

    def __len__(self) -> int:
        return len(self._seen)


class OnlyOneCollector(MatchCollector):
    """Accepts at most one distinct match.

    Recording a second, different path raises MultipleMatchError right away
    so the finder can stop pulling from the traverser. Seeing the same path
    again, e.g. because a root was listed twice, is not a second match.
    """

    def __init__(self):
        self._match: Optional[str] = None

    def add(self, path: str) -> None:
        if self._match is None:
            self._match = path
            return
        if path == self._match:
            return
        logger.debug("Second match %s after %s", path, self._match)
        raise MultipleMatchError([self._match, path])

    def result(self) -> Optional[str]:
        return self._match
