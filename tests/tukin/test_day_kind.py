from datetime import date

from src.attendance_recap.attendance_recap.core.enums import DayKind
from src.attendance_recap.attendance_recap.tukin.day_kind import classify_day, filter_reportable_days
from src.attendance_recap.attendance_recap.tukin.model import TukinDay


def _day(**kwargs):
    kwargs.setdefault("work_date", "2025-01-06")
    return TukinDay(**kwargs)


def test_leave_beats_duty():
    r = classify_day(_day(leave_type="CUTI_TAHUNAN", is_duty_schedule=True, note="PIKET"))
    assert r.kind == DayKind.LEAVE
    assert r.label == "CUTI TAHUNAN"


def test_dinas_luar_special_case():
    assert classify_day(_day(leave_type="DINAS_LUAR", note="DINASLUAR")).label == "DINAS LUAR"
    assert classify_day(_day(leave_type="DINAS_LUAR", note="WORKDAY")).label == "DINAS LUAR"
    assert classify_day(_day(leave_type="WFH", note="DINASLUAR")).label == "WFH"


def test_duty_without_attendance_is_flagged():
    r = classify_day(_day(is_duty_schedule=True, note=None, earned_credit=0.0))
    assert r.kind == DayKind.DUTY
    assert r.label == "DUTY SCHEDULE - TANPA ABSEN"

    r = classify_day(_day(is_duty_schedule=True, note="PIKET", earned_credit=1.0, check_in_at="2025-01-06T01:00:00Z"))
    assert r.label == "PIKET"


def test_duty_ranks_above_presence():
    r = classify_day(_day(is_duty_schedule=True, note="WORKDAY", earned_credit=1.0, check_in_at="2025-01-06T01:00:00Z"))
    assert r.kind == DayKind.DUTY


def test_workday_presence_and_lateness():
    assert classify_day(_day(note="WORKDAY", check_in_at="2025-01-06T01:00:00Z")).label == "HADIR"
    r = classify_day(_day(note="HALFDAY", check_in_at="2025-01-06T01:20:00Z", late_minutes=20))
    assert r.kind == DayKind.PRESENT
    assert r.label == "HADIR - Telat 20 m"


def test_workday_without_check_in_is_absent():
    r = classify_day(_day(note="WORKDAY", check_in_at=" "))
    assert r.kind == DayKind.ABSENT
    assert r.label == "TIDAK HADIR"


def test_other_notes():
    assert classify_day(_day(note="HOLIDAY")).label == "HOLIDAY"
    r = classify_day(_day(note=None))
    assert r.kind == DayKind.OTHER
    assert r.label == "UNKNOWN"


def test_filter_drops_ignored_holidays_and_future():
    days = [
        _day(work_date="2025-01-05", note="HOLIDAY_IGNORED"),
        _day(work_date="2025-01-06", note="WORKDAY"),
        _day(work_date="2025-01-07", note="WORKDAY"),
        _day(work_date="2025-01-08", note="WORKDAY"),
        _day(work_date="bad-date", note="WORKDAY"),
    ]
    kept = filter_reportable_days(days, today=date(2025, 1, 7))
    assert [d.work_date for d in kept] == ["2025-01-06", "2025-01-07", "bad-date"]
