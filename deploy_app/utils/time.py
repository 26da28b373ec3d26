"""Timestamp helpers for JSON responses."""

from datetime import datetime, timezone
from typing import Optional


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a moment as ISO-8601 UTC text with millisecond precision.

    Example: ``2025-01-01T12:00:00.000Z``

    Args:
        now: Moment to format. Naive datetimes are treated as UTC.
             Defaults to the current time.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
