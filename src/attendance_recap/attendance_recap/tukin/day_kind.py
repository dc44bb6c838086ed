"""Day-kind classification for the allowance breakdown.

Precedence differs from the per-side recap classifier on purpose: here duty
ranks above ordinary presence (but below leave). Keep the two separate.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List

from ..common.datetime_utils import parse_iso_date
from ..common.labels import humanize_code
from ..core.enums import DayKind
from .model import DayKindResult, TukinDay

HOLIDAY_IGNORED = "HOLIDAY_IGNORED"
_WORKING_NOTES = {"WORKDAY", "HALFDAY"}


def classify_day(day: TukinDay) -> DayKindResult:
    leave_type = (day.leave_type or "").strip()
    if leave_type:
        if leave_type == "DINAS_LUAR" and day.note == "DINASLUAR":
            return DayKindResult(DayKind.LEAVE, "DINAS LUAR")
        return DayKindResult(DayKind.LEAVE, humanize_code(leave_type))

    if day.is_duty_schedule:
        base = day.note or "DUTY SCHEDULE"
        label = f"{base} - TANPA ABSEN" if day.earned_credit == 0 else base
        return DayKindResult(DayKind.DUTY, label)

    note = day.note or ""
    if note in _WORKING_NOTES:
        if (day.check_in_at or "").strip():
            late = day.late_minutes
            if late is not None and late > 0:
                return DayKindResult(DayKind.PRESENT, f"HADIR - Telat {late} m")
            return DayKindResult(DayKind.PRESENT, "HADIR")
        return DayKindResult(DayKind.ABSENT, "TIDAK HADIR")

    return DayKindResult(DayKind.OTHER, note.strip() or "UNKNOWN")


def _not_after(raw: str, today: date) -> bool:
    try:
        return parse_iso_date(raw) <= today
    except ValueError:
        # Unparseable dates are kept.
        return True


def filter_reportable_days(days: Iterable[TukinDay], *, today: date) -> List[TukinDay]:
    """Drop ignored holidays and anything after today."""
    return [d for d in days if d.note != HOLIDAY_IGNORED and _not_after(d.work_date, today)]
