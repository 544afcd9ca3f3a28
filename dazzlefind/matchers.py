"""Ready-made predicates.

Thin helpers built on the predicate contract: each returns a plain
synchronous callable taking an absolute path string, so the results work
with both the sync and the async finders.
"""

import fnmatch
import os
import re
from typing import Callable, Pattern, Union

BasenamePattern = Union[str, Pattern[str]]


def _basename(path: str) -> str:
    return os.path.basename(path.rstrip(os.sep)) or path


def of_basename(*patterns: BasenamePattern) -> Callable[[str], bool]:
    """Match paths whose final component equals or matches one of patterns.

    String patterns are compared for equality; compiled regular expressions
    are applied with search(), so anchor them when needed. With no patterns
    the predicate never passes.

    Example:
        >>> find_all_sync("docs", of_basename("index.md", re.compile(r"^README")))
    """
    for pattern in patterns:
        if not isinstance(pattern, (str, re.Pattern)):
            raise TypeError(
                f"basename patterns must be str or compiled regex, got {type(pattern).__name__}"
            )

    names = frozenset(p for p in patterns if isinstance(p, str))
    regexes = tuple(p for p in patterns if not isinstance(p, str))

    def predicate(path: str) -> bool:
        name = _basename(path)
        if name in names:
            return True
        return any(regex.search(name) for regex in regexes)

    predicate.__qualname__ = f"of_basename({', '.join(map(repr, patterns))})"
    return predicate


def of_glob(*patterns: str) -> Callable[[str], bool]:
    """Match paths whose final component matches one of the glob patterns.

    Uses fnmatch semantics (case-sensitivity follows the platform).
    """
    for pattern in patterns:
        if not isinstance(pattern, str):
            raise TypeError(f"glob patterns must be str, got {type(pattern).__name__}")

    def predicate(path: str) -> bool:
        name = _basename(path)
        return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)

    predicate.__qualname__ = f"of_glob({', '.join(map(repr, patterns))})"
    return predicate


def all_of(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    """Combine synchronous predicates; passes when every one passes.

    With no predicates the result never passes, like an empty finder call.
    """
    def predicate(path: str) -> bool:
        return bool(predicates) and all(p(path) for p in predicates)

    return predicate


def any_of(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    """Combine synchronous predicates; passes when at least one passes."""
    def predicate(path: str) -> bool:
        return any(p(path) for p in predicates)

    return predicate


__all__ = [
    'of_basename',
    'of_glob',
    'all_of',
    'any_of',
]
