from __future__ import annotations

import math
from datetime import datetime, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def whole_days_between(start: datetime, end: datetime) -> int:
    """Number of complete days from start to end (floored, negative if end precedes start)."""
    seconds = (to_utc(end) - to_utc(start)).total_seconds()
    return math.floor(seconds / SECONDS_PER_DAY)


def round_half_up(value: float) -> int:
    # Built-in round() rounds halves to even; averages here round .5 upwards.
    return math.floor(value + 0.5)
