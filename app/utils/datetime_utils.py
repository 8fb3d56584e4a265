"""
Common date/time utility functions for consistent date/time handling across the application

Storage: All timestamps are stored in UTC (ISO 8601 format)
Display: Timestamps are rendered as UTC ISO strings with a 'Z' suffix
"""

from datetime import datetime, timezone


def as_utc(dt: datetime) -> datetime:
    """
    Convert dt to tz-aware UTC.
    If dt is naive, we treat it as UTC.

    Args:
        dt: datetime object (naive or timezone-aware)

    Returns:
        datetime object in UTC timezone
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    """
    Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def to_iso_string(dt: datetime) -> str:
    """
    Format a datetime as a UTC ISO 8601 string with millisecond precision
    and a 'Z' suffix (e.g., "2024-12-28T10:30:00.000Z").
    """
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def truncate_to_milliseconds(dt: datetime) -> datetime:
    """Drop sub-millisecond precision (the precision of to_iso_string)."""
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)
