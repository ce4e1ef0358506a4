# src/meetingbot/core/dates.py
"""
Timestamp helpers.

Everything is stored as ISO-8601 UTC with millisecond precision
(``2024-01-15T10:00:00.000+00:00``) so that string comparison in the store
matches chronological order.
"""

import math
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return ensure_utc(value).isoformat(timespec="milliseconds")


def parse_iso(value) -> Optional[datetime]:
    """Parse a stored timestamp (string or datetime) into an aware UTC datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def duration_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two instants, rounded half up."""
    millis = (ensure_utc(end) - ensure_utc(start)).total_seconds() * 1000
    return int(math.floor(millis / 60000 + 0.5))
