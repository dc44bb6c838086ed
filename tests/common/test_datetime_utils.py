from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

import pytest

from src.attendance_recap.attendance_recap.common.datetime_utils import (
    local_day_bounds_utc,
    parse_clock_minutes,
    parse_instant,
    parse_month,
    resolve_zone,
    today_in_zone,
)


@pytest.mark.parametrize(
    "raw,expected",
    [("08:00", 480), ("08:00:30", 480), ("16:45:00", 1005), (time(7, 30), 450), ("", None), ("24:00", None), ("ab:cd", None), (None, None)],
)
def test_parse_clock_minutes(raw, expected):
    assert parse_clock_minutes(raw) == expected


def test_parse_instant_variants():
    utc = datetime(2025, 1, 6, 1, 15, tzinfo=timezone.utc)
    assert parse_instant("2025-01-06T01:15:00Z") == utc
    assert parse_instant("2025-01-06T08:15:00+07:00") == utc
    assert parse_instant(datetime(2025, 1, 6, 1, 15)) == utc
    assert parse_instant("yesterday") is None
    assert parse_instant("   ") is None


def test_parse_month_handles_leap_february():
    assert parse_month("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    assert parse_month("2025-12") == (date(2025, 12, 1), date(2025, 12, 31))


def test_resolve_zone_falls_back_on_unknown():
    assert resolve_zone("Asia/Makassar").key == "Asia/Makassar"
    assert resolve_zone("Mars/Olympus").key == "Asia/Jakarta"
    assert resolve_zone(None, default="UTC").key == "UTC"


def test_today_in_zone_crosses_midnight():
    now = datetime(2025, 1, 6, 18, 30, tzinfo=timezone.utc)
    assert today_in_zone(ZoneInfo("Asia/Jakarta"), now=now) == date(2025, 1, 7)
    assert today_in_zone(ZoneInfo("UTC"), now=now) == date(2025, 1, 6)


def test_local_day_bounds():
    lo, hi = local_day_bounds_utc(date(2025, 1, 6), date(2025, 1, 7), ZoneInfo("Asia/Jakarta"))
    assert lo == datetime(2025, 1, 5, 17, 0, tzinfo=timezone.utc)
    assert hi == datetime(2025, 1, 7, 17, 0, tzinfo=timezone.utc)
