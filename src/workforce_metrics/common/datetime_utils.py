from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from typing import Optional

SECONDS_PER_DAY = 24 * 60 * 60


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: str) -> time:
    """Parse 'HH:MM' or 'HH:MM:SS' into a time."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current time, naive local unless ``tz`` is given.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def to_local(value: datetime, tz: Optional[tzinfo]) -> datetime:
    """Move an aware timestamp into ``tz``; naive timestamps are returned as-is."""
    if tz is None or value.tzinfo is None:
        return value
    return value.astimezone(tz)


def at_time_of_day(value: datetime, when: time) -> datetime:
    """Same calendar day (and tzinfo) as ``value`` at wall-clock ``when``."""
    return value.replace(hour=when.hour, minute=when.minute, second=when.second, microsecond=0)


def elapsed_days(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / SECONDS_PER_DAY


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)
