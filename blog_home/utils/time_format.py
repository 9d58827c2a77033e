"""Timestamp renderings used in entry headers."""

from datetime import UTC, datetime


def _as_utc(dt: datetime) -> datetime:
    # Naive timestamps from the database are stored in UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def render_datetime_time(dt: datetime) -> str:
    """Machine-readable timestamp for <time datetime="...">, e.g. '2014-03-03T18:30:00Z'."""
    return _as_utc(dt).strftime("%Y-%m-%dT%H:%M:%SZ")


def render_friendly_time(dt: datetime) -> str:
    """Human-friendly date, e.g. 'Monday March 3, 2014'."""
    dt = _as_utc(dt)
    return f"{dt:%A} {dt:%B} {dt.day}, {dt.year}"
