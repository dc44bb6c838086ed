from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from ..core.enums import DayKind


@dataclass(frozen=True)
class TukinDay:
    """One day of a stored allowance calculation, annotated by the server.

    work_date stays text: rows come straight from the stored JSON payload.
    """

    work_date: str
    note: Optional[str] = None
    check_in_at: Optional[str] = None
    check_out_at: Optional[str] = None
    earned_credit: float = 0.0
    expected_unit: float = 0.0
    late_minutes: Optional[int] = None
    leave_type: Optional[str] = None
    leave_credit: Optional[float] = None
    is_duty_schedule: bool = False
    duty_schedule_id: Optional[str] = None

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "TukinDay":
        late = raw.get("late_minutes")
        leave_credit = raw.get("leave_credit")
        return cls(
            work_date=str(raw.get("work_date") or ""),
            note=raw.get("note"),
            check_in_at=raw.get("check_in_at"),
            check_out_at=raw.get("check_out_at"),
            earned_credit=float(raw.get("earned_credit") or 0.0),
            expected_unit=float(raw.get("expected_unit") or 0.0),
            late_minutes=int(late) if late is not None else None,
            leave_type=raw.get("leave_type"),
            leave_credit=float(leave_credit) if leave_credit is not None else None,
            is_duty_schedule=bool(raw.get("is_duty_schedule")),
            duty_schedule_id=raw.get("duty_schedule_id"),
        )


@dataclass(frozen=True)
class TukinBreakdown:
    month: str
    days: Tuple[TukinDay, ...] = ()
    present_days: int = 0
    absent_days: int = 0
    missing_checkout_days: int = 0
    duty_present: int = 0
    duty_absent: int = 0
    total_late_minutes: int = 0

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "TukinBreakdown":
        return cls(
            month=str(raw.get("month") or ""),
            days=tuple(TukinDay.from_payload(d) for d in raw.get("days") or ()),
            present_days=int(raw.get("present_days") or 0),
            absent_days=int(raw.get("absent_days") or 0),
            missing_checkout_days=int(raw.get("missing_checkout_days") or 0),
            duty_present=int(raw.get("duty_present") or 0),
            duty_absent=int(raw.get("duty_absent") or 0),
            total_late_minutes=int(raw.get("total_late_minutes") or 0),
        )


@dataclass(frozen=True)
class TukinCalculation:
    """Stored allowance result for one subject and month (computed elsewhere)."""

    month: str
    subject_id: str
    org_unit_id: str
    base_tukin: int
    expected_units: float
    earned_credit: float
    attendance_ratio: float
    final_tukin: int
    breakdown: Optional[TukinBreakdown] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class DayKindResult:
    kind: DayKind
    label: str
