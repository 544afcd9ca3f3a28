"""Predicate chain shared by the sync and async finders.

A chain folds an ordered sequence of predicates into a tagged ChainResult
instead of a bare boolean, so callers can tell "stopped because a predicate
said no" apart from "stopped because a predicate raised" without relying on
exception unwinding alone.
"""

import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Iterable, Optional, Tuple, Union

from ..errors import PredicateSuspendedError

logger = logging.getLogger(__name__)

Predicate = Callable[[str], Union[bool, Awaitable[bool]]]
SyncPredicate = Callable[[str], bool]


class Outcome(Enum):
    """Result tag of a chain evaluation."""
    PASS = "pass"
    FAIL = "fail"
    ERRORED = "errored"


@dataclass(frozen=True)
class ChainResult:
    """Outcome of running a PredicateChain against one path.

    Attributes:
        outcome: PASS, FAIL or ERRORED
        index: Index of the predicate that stopped the chain (None on PASS
            and for an empty chain)
        error: The exception raised by that predicate when ERRORED
    """

    outcome: Outcome
    index: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS

    @property
    def errored(self) -> bool:
        return self.outcome is Outcome.ERRORED

    def unwrap(self) -> bool:
        """Return whether the path passed, re-raising a predicate's error."""
        if self.outcome is Outcome.ERRORED:
            raise self.error
        return self.outcome is Outcome.PASS


PASSED = ChainResult(Outcome.PASS)
EMPTY = ChainResult(Outcome.FAIL)


class PredicateChain:
    """Ordered conjunction of predicates with short-circuit evaluation.

    Predicates receive an absolute path string and may be plain functions or
    coroutine functions (or any callable returning an awaitable). The chain
    passes only when every predicate returns a truthy value; it stops at the
    first falsy result or the first raised exception, and later predicates
    are never called.

    An empty chain never passes: supplying no predicates means nothing
    qualifies.
    """

    def __init__(self, predicates: Iterable[Predicate] = ()):
        self._predicates: Tuple[Predicate, ...] = tuple(predicates)
        for index, predicate in enumerate(self._predicates):
            if not callable(predicate):
                raise TypeError(
                    f"predicate at position {index} is not callable: {predicate!r}"
                )

    @property
    def predicates(self) -> Tuple[Predicate, ...]:
        return self._predicates

    @property
    def is_empty(self) -> bool:
        return not self._predicates

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"PredicateChain({len(self._predicates)} predicates)"

    def evaluate_sync(self, path: str) -> ChainResult:
        """Evaluate the chain without suspending.

        A predicate that hands back an awaitable is rejected: the awaitable
        is closed unawaited and the chain reports ERRORED with a
        PredicateSuspendedError.
        """
        if not self._predicates:
            return EMPTY

        for index, predicate in enumerate(self._predicates):
            try:
                result = predicate(path)
            except Exception as error:
                logger.debug("Predicate %d raised on %s: %r", index, path, error)
                return ChainResult(Outcome.ERRORED, index, error)

            if inspect.isawaitable(result):
                _discard_awaitable(result)
                return ChainResult(
                    Outcome.ERRORED, index, PredicateSuspendedError(predicate, path)
                )

            if not result:
                return ChainResult(Outcome.FAIL, index)

        return PASSED

    async def evaluate(self, path: str) -> ChainResult:
        """Evaluate the chain, awaiting any awaitable predicate result."""
        if not self._predicates:
            return EMPTY

        for index, predicate in enumerate(self._predicates):
            try:
                result = predicate(path)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as error:
                logger.debug("Predicate %d raised on %s: %r", index, path, error)
                return ChainResult(Outcome.ERRORED, index, error)

            if not result:
                return ChainResult(Outcome.FAIL, index)

        return PASSED

    def test_sync(self, path: str) -> bool:
        """Boolean form of evaluate_sync; predicate errors are re-raised."""
        return self.evaluate_sync(path).unwrap()

    async def test(self, path: str) -> bool:
        """Boolean form of evaluate; predicate errors are re-raised."""
        return (await self.evaluate(path)).unwrap()


def _discard_awaitable(awaitable: Any) -> None:
    # Closing a never-started coroutine avoids the "never awaited" warning.
    close = getattr(awaitable, 'close', None)
    if close is not None:
        close()
    elif hasattr(awaitable, 'cancel'):
        awaitable.cancel()
