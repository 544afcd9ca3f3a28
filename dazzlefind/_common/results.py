"""Result containers returned by the finders."""

from collections.abc import Set
from typing import FrozenSet, Iterable, Iterator, Tuple, Union, overload


class MatchSet(Set):
    """Immutable set of matching absolute paths kept in ascending order.

    Behaves as a regular set for membership, length, set algebra and
    equality (a MatchSet equals a builtin set with the same members), and
    additionally iterates and indexes in lexicographic path order, which is
    the only order the finders guarantee.
    """

    __slots__ = ('_paths', '_members')

    def __init__(self, paths: Iterable[str] = ()):
        self._members: FrozenSet[str] = frozenset(paths)
        self._paths: Tuple[str, ...] = tuple(sorted(self._members))

    @classmethod
    def _from_iterable(cls, iterable: Iterable[str]) -> 'MatchSet':
        return cls(iterable)

    def __contains__(self, path: object) -> bool:
        return path in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[str, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[str, Tuple[str, ...]]:
        return self._paths[index]

    __hash__ = Set._hash

    def as_list(self):
        """Return the paths as a new sorted list."""
        return list(self._paths)

    def __repr__(self) -> str:
        return f"MatchSet({list(self._paths)!r})"
