"""Time helpers shared by the scheduler components."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _as_timedelta(value: timedelta | int | float) -> timedelta:
    """Accept a timedelta or a number of milliseconds."""
    if isinstance(value, timedelta):
        return value
    return timedelta(milliseconds=value)


def now() -> datetime:
    """Return the current wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def timestamp_to_string(ms: timedelta | int | float) -> str:
    """Format a duration since the epoch as a local ``YYYY-MM-DD HH:MM:SS`` string.

    Sub-second precision is truncated.
    """
    since_epoch = _as_timedelta(ms)
    seconds = since_epoch // timedelta(seconds=1)
    return datetime.fromtimestamp(seconds).strftime(TIMESTAMP_FORMAT)


def sleep_for_millis(ms: timedelta | int | float) -> None:
    """Block the calling thread for the given duration; negative durations return at once."""
    seconds = _as_timedelta(ms).total_seconds()
    if seconds > 0:
        time.sleep(seconds)