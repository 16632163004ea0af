"""Collector of errors with notes."""

from __future__ import annotations

from dataclasses import dataclass

from .sets import MapSet


@dataclass(frozen=True)
class _ErrorItem:
    note: str
    error: BaseException


class ErrorStore:
    """Collects errors together with a short note about each."""

    def __init__(self) -> None:
        self._items: list[_ErrorItem] = []

    def add(self, note: str, error: BaseException) -> None:
        """Record an error."""
        self._items.append(_ErrorItem(note, error))

    def add_and_show(self, note: str, error: BaseException) -> None:
        """Record an error and print it."""
        self.add(note, error)
        print(error)

    def notes(self) -> list[str]:
        """Notes of all recorded errors, in order."""
        return [item.note for item in self._items]

    def notes_set(self) -> MapSet[str]:
        """Distinct notes of all recorded errors."""
        return MapSet(item.note for item in self._items)

    def has_error(self) -> bool:
        """Whether any error has been recorded."""
        return bool(self._items)