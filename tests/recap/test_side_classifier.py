from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from src.attendance_recap.attendance_recap.attendance.model import AttendanceRecord
from src.attendance_recap.attendance_recap.core.enums import DayType, SideCode
from src.attendance_recap.attendance_recap.recap.side_classifier import classify_sides
from src.attendance_recap.attendance_recap.workdays.model import CalendarDay

JKT = ZoneInfo("Asia/Jakarta")
DAY = date(2025, 1, 6)
WORKDAY = CalendarDay(work_date=DAY, day_type=DayType.WORKDAY, expected_start="08:00:00", expected_end="16:00:00")


def _record(**kwargs):
    return AttendanceRecord(work_date=DAY, **kwargs)


def test_pending_wins_over_everything():
    rec = _record(check_in_at="2025-01-06T01:15:00Z", check_out_leave_type="SAKIT")
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=True)
    assert in_s.code == SideCode.PENDING_TODAY
    assert out_s.code == SideCode.PENDING_TODAY


def test_no_record_is_missing_both():
    in_s, out_s = classify_sides(None, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.MISSING_BOTH
    assert out_s.code == SideCode.MISSING_BOTH


def test_late_check_in_in_configured_zone():
    # 01:15Z is 08:15 in Jakarta
    rec = _record(
        check_in_at="2025-01-06T01:15:00Z",
        check_out_at="2025-01-06T09:05:00Z",
        check_in_geofence_name="Mako",
    )
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.LATE
    assert in_s.minutes == 15
    assert in_s.detail == "Mako"
    assert out_s.code == SideCode.NORMAL


def test_check_in_exactly_on_time_is_normal():
    rec = _record(check_in_at=datetime(2025, 1, 6, 1, 0, 59, tzinfo=timezone.utc), check_out_at="2025-01-06T09:00:00Z")
    in_s, _ = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.NORMAL


def test_naive_datetime_is_treated_as_utc():
    rec = _record(check_in_at=datetime(2025, 1, 6, 1, 1), check_out_at=datetime(2025, 1, 6, 9, 0))
    in_s, _ = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.LATE
    assert in_s.minutes == 1


def test_early_out_carries_minutes_in_detail():
    rec = _record(check_in_at="2025-01-06T00:55:00Z", check_out_at="2025-01-06T08:30:00Z")
    _, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert out_s.code == SideCode.EARLY_OUT
    assert out_s.minutes == 30
    assert out_s.detail == "30 menit lebih awal"


def test_missing_in_takes_precedence_over_leave():
    rec = _record(check_out_at="2025-01-06T09:00:00Z", check_in_leave_type="IJIN")
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.MISSING_IN
    assert out_s.code == SideCode.NORMAL


def test_missing_out_when_only_check_in():
    rec = _record(check_in_at="2025-01-06T00:50:00Z")
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.NORMAL
    assert out_s.code == SideCode.MISSING_OUT


def test_leave_side_is_not_time_evaluated():
    rec = _record(
        check_in_at="2025-01-06T03:00:00Z",
        check_out_at="2025-01-06T04:00:00Z",
        check_out_leave_type="DINAS_LUAR",
        check_out_leave_notes="Rapat di Polda",
    )
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.LATE
    assert out_s.code == SideCode.LEAVE
    assert out_s.label == "Dinas Luar"
    assert out_s.detail == "Rapat di Polda"
    assert out_s.minutes is None


def test_normal_leave_type_is_not_an_override():
    rec = _record(check_in_at="2025-01-06T00:50:00Z", check_out_at="2025-01-06T09:00:00Z", check_in_leave_type="NORMAL")
    in_s, _ = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.NORMAL


def test_unknown_leave_type_label_replaces_underscores():
    rec = _record(
        check_in_at="2025-01-06T00:50:00Z",
        check_out_at="2025-01-06T09:00:00Z",
        check_in_leave_type="TUGAS_BELAJAR",
    )
    in_s, _ = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.LEAVE
    assert in_s.label == "TUGAS BELAJAR"


def test_malformed_expectation_falls_through_to_normal():
    cal = CalendarDay(work_date=DAY, day_type=DayType.WORKDAY, expected_start="8 AM", expected_end="25:00")
    rec = _record(check_in_at="2025-01-06T05:00:00Z", check_out_at="2025-01-06T06:00:00Z")
    in_s, out_s = classify_sides(rec, cal, zone=JKT, pending=False)
    assert in_s.code == SideCode.NORMAL
    assert out_s.code == SideCode.NORMAL


def test_unparseable_timestamp_counts_as_absent():
    rec = _record(check_in_at="not-a-time", check_out_at="2025-01-06T09:00:00Z")
    in_s, _ = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.MISSING_IN


def test_manual_flag_is_echoed_on_every_side():
    rec = _record(
        check_in_at="2025-01-06T00:50:00Z",
        check_out_at="2025-01-06T09:00:00Z",
        is_manual=True,
        manual_note="Input by admin",
    )
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.manual and out_s.manual
    assert in_s.manual_note == out_s.manual_note == "Input by admin"

    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=True)
    assert in_s.code == SideCode.PENDING_TODAY
    assert in_s.manual


def test_half_override_without_timestamps():
    rec = _record(check_in_leave_type="SAKIT")
    in_s, out_s = classify_sides(rec, WORKDAY, zone=JKT, pending=False)
    assert in_s.code == SideCode.LEAVE
    assert out_s.code == SideCode.MISSING_OUT
