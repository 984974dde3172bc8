"""Time utilities for UTC timestamp formatting."""

from datetime import datetime, timezone


def to_utc(dt: datetime) -> datetime:
    """
    Convert datetime to UTC.

    Naive datetimes are taken to already be UTC (SQLite drops the offset
    when storing timestamps).
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_utc_string(dt: datetime) -> str:
    """
    Format a datetime as a UTC timestamp string.

    Fractional seconds are trimmed of trailing zeros and omitted entirely
    when zero.

    Args:
        dt: Datetime object (naive values are treated as UTC)

    Returns:
        Timestamp like '2025-12-23 00:27:07.8 +0000 UTC'

    Example:
        >>> from datetime import datetime, timezone
        >>> to_utc_string(datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        '2020-01-02 03:04:05 +0000 UTC'
    """
    dt_utc = to_utc(dt)
    text = dt_utc.strftime("%Y-%m-%d %H:%M:%S")
    if dt_utc.microsecond:
        text += "." + f"{dt_utc.microsecond:06d}".rstrip("0")
    return f"{text} +0000 UTC"
