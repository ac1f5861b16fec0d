"""Tests for timezone helpers."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from raid_planner.models.raid import format_duration
from raid_planner.utils.timeutils import ensure_aware, local_date, to_local

PARIS = ZoneInfo("Europe/Paris")


def test_ensure_aware_attaches_timezone_to_naive():
    value = ensure_aware(datetime(2025, 8, 20, 19, 0), PARIS)
    assert value.tzinfo is PARIS
    assert value.hour == 19


def test_ensure_aware_keeps_aware_values():
    value = datetime(2025, 8, 20, 17, 0, tzinfo=timezone.utc)
    assert ensure_aware(value, PARIS) is value


def test_to_local_converts_instant():
    value = to_local(datetime(2025, 8, 20, 17, 0, tzinfo=timezone.utc), PARIS)
    assert (value.hour, value.minute) == (19, 0)


def test_local_date_crosses_midnight():
    """23:30 UTC is already the next day in Paris during summer time."""
    assert local_date(datetime(2025, 8, 20, 23, 30, tzinfo=timezone.utc), PARIS) == date(2025, 8, 21)


def test_format_duration():
    assert format_duration(45) == "45min"
    assert format_duration(180) == "3h"
    assert format_duration(150) == "2h 30min"
