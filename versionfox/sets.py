"""Hash set and insertion-ordered set."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class MapSet(Generic[T]):
    """An unordered set of hashable values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: dict[T, None] = {}
        for value in values:
            self.add(value)

    def add(self, value: T) -> bool:
        """Add a value; return True if it was not present before."""
        if value in self._values:
            return False
        self._values[value] = None
        return True

    def remove(self, value: T) -> None:
        """Remove a value if present."""
        self._values.pop(value, None)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"MapSet({list(self._values)!r})"


class SortedSet(Generic[T]):
    """A set that keeps its values in insertion order."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._elements: list[T] = []
        self._members: set[T] = set()
        for value in values:
            self.add(value)

    def add(self, value: T) -> bool:
        """Append a value; return True if it was not present before."""
        if value in self._members:
            return False
        self._elements.append(value)
        self._members.add(value)
        return True

    def remove(self, value: T) -> None:
        """Remove a value if present, keeping the order of the others."""
        if value in self._members:
            self._members.discard(value)
            self._elements.remove(value)

    def insert(self, index: int, value: T) -> bool:
        """Insert a value at a position; return False if out of range or present."""
        if index < 0 or index > len(self._elements):
            return False
        if value in self._members:
            return False
        self._elements.insert(index, value)
        self._members.add(value)
        return True

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._elements))

    def __repr__(self) -> str:
        return f"SortedSet({self._elements!r})"