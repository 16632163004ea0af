"""Scopes of a version switch and locations of linked packages."""

from __future__ import annotations

from enum import IntEnum


class UseScope(IntEnum):
    """Where a chosen version takes effect."""

    GLOBAL = 0
    PROJECT = 1
    SESSION = 2

    def __str__(self) -> str:
        return self.name.lower()


class Location(IntEnum):
    """Where a package is linked to."""

    ORIGINAL = 0
    GLOBAL = 1
    SHELL = 2

    def __str__(self) -> str:
        return self.name.lower()