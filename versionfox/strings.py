"""String helpers exposed to plugins, with the semantics of their host runtime."""

from __future__ import annotations

import math
from typing import Any, Iterable


def _display(value: Any) -> str:
    """Text form of a scripting value, as the scripting runtime would print it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return format(value, ".14g")
    return str(value)


def split(text: str, sep: str = "") -> list[str]:
    """Split ``text`` at every ``sep``; an empty separator splits into characters."""
    if sep == "":
        return list(text)
    return text.split(sep)


def fields(text: str) -> list[str]:
    """Split ``text`` around runs of whitespace, dropping empty parts."""
    return text.split()


def has_prefix(text: str, prefix: str) -> bool:
    """Whether ``text`` starts with ``prefix``."""
    return text.startswith(prefix)


def has_suffix(text: str, suffix: str) -> bool:
    """Whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def trim(text: str, cutset: str) -> str:
    """Remove leading and trailing characters contained in ``cutset``."""
    if cutset == "":
        return text
    return text.strip(cutset)


def trim_space(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip()


def trim_prefix(text: str, prefix: str) -> str:
    """Remove ``prefix`` from the start of ``text`` if present."""
    return text.removeprefix(prefix)


def trim_suffix(text: str, suffix: str) -> str:
    """Remove ``suffix`` from the end of ``text`` if present."""
    return text.removesuffix(suffix)


def contains(text: str, sub: str) -> bool:
    """Whether ``sub`` occurs in ``text``."""
    return sub in text


def join(items: Iterable[Any], sep: str) -> str:
    """Join the text forms of ``items`` with ``sep``."""
    return sep.join(_display(item) for item in items)