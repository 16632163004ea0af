"""Time helpers working in local time."""

from __future__ import annotations

import time
from datetime import date, datetime


def timestamp() -> int:
    """Current Unix time in seconds."""
    return int(time.time())


def begin_of_today() -> int:
    """Unix time of local midnight at the start of today."""
    midnight = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp())


def is_before_today(timestamp: int) -> bool:
    """Whether the given Unix time falls on a local day before today."""
    return date.fromtimestamp(timestamp) < date.today()