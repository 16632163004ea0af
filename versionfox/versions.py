"""Comparison and ordering of dotted version strings."""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _part_value(part: str) -> int:
    """Numeric value of one version component; anything non-numeric counts as 0."""
    if _INTEGER.fullmatch(part):
        return int(part)
    return 0


def compare_version(v1: str, v2: str) -> int:
    """Compare two dotted versions, returning 1, -1 or 0.

    Missing components are treated as 0, as are components that are not integers.
    """
    parts1 = v1.split(".")
    parts2 = v2.split(".")
    for i in range(max(len(parts1), len(parts2))):
        part1 = _part_value(parts1[i]) if i < len(parts1) else 0
        part2 = _part_value(parts2[i]) if i < len(parts2) else 0
        if part1 != part2:
            return 1 if part1 > part2 else -1
    return 0


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return the versions sorted from newest to oldest."""
    return sorted(versions, key=cmp_to_key(lambda a, b: compare_version(b, a)))