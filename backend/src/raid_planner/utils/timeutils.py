"""Timezone-aware helpers for the viewer's calendar."""

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo


def get_timezone(name: str) -> ZoneInfo:
    """Get the timezone object for a configured IANA name."""
    return ZoneInfo(name)


def now(tz: tzinfo) -> datetime:
    """Current timezone-aware datetime."""
    return datetime.now(tz)


def ensure_aware(value: datetime, tz: tzinfo) -> datetime:
    """Attach `tz` to a naive datetime; aware datetimes are returned as-is."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value


def to_local(value: datetime, tz: tzinfo) -> datetime:
    """Convert an instant to the viewer's timezone.

    Naive datetimes are read as already local.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def local_date(value: datetime, tz: tzinfo) -> date:
    """Calendar day of an instant in the viewer's timezone."""
    return to_local(value, tz).date()
