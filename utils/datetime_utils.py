"""
Datetime utilities for consistent timezone handling across the application.
All datetime operations should use timezone-aware datetimes.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)


def to_iso_string(dt: datetime) -> str:
    """
    Convert datetime to an ISO 8601 UTC string with millisecond precision.

    Naive datetimes are assumed to be UTC. Output uses the `Z` suffix,
    e.g. "2024-01-15T10:00:00.000Z".

    Args:
        dt: Datetime object (timezone-aware or naive)

    Returns:
        ISO format string
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
