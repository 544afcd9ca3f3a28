"""Exception hierarchy for DazzleFind.

Every failure raised by the finders themselves derives from FinderError.
Exceptions raised by user predicates are NOT wrapped: they propagate to
the caller unchanged, in both the sync and the async flavour.
"""

from typing import Optional, Sequence


class FinderError(Exception):
    """Base class for all DazzleFind errors."""


class InvalidRootError(FinderError):
    """A root directory handed to a finder cannot be searched.

    Raised during the validation phase, before any predicate runs, so a
    single bad root aborts the whole call no matter what the other roots
    would have matched.

    Attributes:
        path: Absolute path of the offending root
    """

    reason = "invalid root directory"

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"{self.reason}: {path}")


class RootNotFoundError(InvalidRootError, FileNotFoundError):
    """The root directory does not exist."""

    reason = "root directory does not exist"


class RootNotADirectoryError(InvalidRootError, NotADirectoryError):
    """The root exists but is a regular file (or another non-directory)."""

    reason = "root is not a directory"


class PredicateSuspendedError(FinderError, TypeError):
    """A predicate returned an awaitable inside the blocking engine.

    The synchronous finders never run an event loop, so async predicates
    must go through dazzlefind.aio instead.
    """

    def __init__(self, predicate, path: str):
        self.predicate = predicate
        self.path = path
        name = getattr(predicate, '__qualname__', repr(predicate))
        super().__init__(
            f"predicate {name} returned an awaitable for {path}; "
            f"use the async finders for async predicates"
        )


class MultipleMatchError(FinderError):
    """More than one distinct path passed every predicate.

    Only raised by the single-match finders. Finding nothing is not an
    error: those finders return None instead.

    Attributes:
        matches: The two distinct paths that were observed
    """

    def __init__(self, matches: Sequence[str]):
        self.matches = tuple(matches)
        listed = ", ".join(self.matches)
        super().__init__(f"expected at most one match, found several: {listed}")


__all__ = [
    'FinderError',
    'InvalidRootError',
    'RootNotFoundError',
    'RootNotADirectoryError',
    'PredicateSuspendedError',
    'MultipleMatchError',
]
