"""JSON encoding and decoding of plugin values.

Encoding follows the conventions of script tables: an empty mapping or list
encodes as ``[]``, a mapping with keys 1..n encodes as an array and a mapping
with string keys as an object with sorted keys.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any


class JsonEncodeError(ValueError):
    """A value cannot be represented as JSON."""


_ERR_NESTED = "cannot encode recursively nested tables to JSON"
_ERR_SPARSE = "cannot encode sparse array"
_ERR_KEYS = "cannot encode mixed or invalid key types"

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_string(text: str) -> str:
    out = ['"']
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ord(ch) < 0x20:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _encode_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise JsonEncodeError(f"json: unsupported value: {value!r}")
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, _, exponent = repr(value).partition("e")
        sign = exponent[0] if exponent[0] in "+-" else "+"
        digits = exponent.lstrip("+-").lstrip("0") or "0"
        return f"{mantissa}e{sign}{digits}"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _type_name(value: Any) -> str:
    if callable(value):
        return "function"
    return type(value).__name__


def _encode(value: Any, visited: set[int]) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _encode_number(value)
    if isinstance(value, str):
        return _encode_string(value)
    if isinstance(value, (list, tuple, dict)):
        if id(value) in visited:
            raise JsonEncodeError(_ERR_NESTED)
        visited.add(id(value))
        if isinstance(value, dict):
            return _encode_table(value, visited)
        return "[" + ",".join(_encode(item, visited) for item in value) + "]"
    raise JsonEncodeError(f"cannot encode {_type_name(value)} to JSON")


def _encode_table(table: dict, visited: set[int]) -> str:
    if not table:
        return "[]"
    keys = list(table)
    if all(isinstance(k, str) for k in keys):
        items = (
            f"{_encode_string(k)}:{_encode(table[k], visited)}" for k in sorted(keys)
        )
        return "{" + ",".join(items) + "}"
    if all(_is_number(k) for k in keys):
        ordered = sorted(keys)
        if ordered != list(range(1, len(ordered) + 1)):
            raise JsonEncodeError(_ERR_SPARSE)
        return "[" + ",".join(_encode(table[k], visited) for k in ordered) + "]"
    raise JsonEncodeError(_ERR_KEYS)


def encode(value: Any) -> str:
    """Return the JSON text of ``value``; raise JsonEncodeError if impossible."""
    return _encode(value, set())


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def decode(data: str | bytes) -> Any:
    """Decode JSON text; numbers become floats, as in the scripting runtime."""
    return json.loads(data, parse_int=float, parse_constant=_reject_constant)