from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from ..attendance.model import AttendanceRecord
from ..core.enums import DayType, RecapKind, SideCode
from ..duty.model import DutyAssignment
from ..leaves.model import LeaveGrant
from ..workdays.model import CalendarDay


@dataclass(frozen=True)
class SideStatus:
    """Classification of one side (check-in or check-out) of a day.

    label is only set for LEAVE; minutes holds late minutes for LATE and
    early minutes for EARLY_OUT.
    """

    code: SideCode
    label: Optional[str] = None
    detail: Optional[str] = None
    minutes: Optional[int] = None
    manual: bool = False
    manual_note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "label": self.label,
            "detail": self.detail,
            "minutes": self.minutes,
            "manual": self.manual,
            "manual_note": self.manual_note,
        }


@dataclass(frozen=True)
class DayStatus:
    work_date: date
    kind: RecapKind
    in_status: Optional[SideStatus]
    out_status: Optional[SideStatus]
    late_minutes: Optional[int] = None
    early_minutes: Optional[int] = None
    has_duty: bool = False
    duty_label: Optional[str] = None
    is_manual: bool = False
    manual_note: Optional[str] = None
    day_type: Optional[DayType] = None
    has_check_in: bool = False
    has_check_out: bool = False
    leave_type: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.kind == RecapKind.PENDING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.work_date.isoformat(),
            "kind": self.kind.value,
            "in_status": self.in_status.to_dict() if self.in_status else None,
            "out_status": self.out_status.to_dict() if self.out_status else None,
            "late_minutes": self.late_minutes,
            "early_minutes": self.early_minutes,
            "has_duty": self.has_duty,
            "duty_label": self.duty_label,
            "is_manual": self.is_manual,
            "manual_note": self.manual_note,
            "day_type": self.day_type.value if self.day_type else None,
            "leave_type": self.leave_type,
        }


@dataclass(frozen=True)
class RangeSummary:
    total_working_days: int = 0
    present: int = 0
    late: int = 0
    early_out: int = 0
    absent_no_record: int = 0
    missing_in: int = 0
    missing_out: int = 0
    dinas_luar: int = 0
    wfa: int = 0
    wfh: int = 0
    ijin: int = 0
    sakit: int = 0
    cuti: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class RecapRequest:
    """Everything one reconciliation needs, already fetched by the caller.

    today must be computed in zone; zone is used for every comparison.
    """

    subject_id: str
    start: date
    end: date
    today: date
    zone: ZoneInfo
    show_today: bool = False
    calendar: Sequence[CalendarDay] = ()
    records: Sequence[AttendanceRecord] = ()
    grants: Sequence[LeaveGrant] = ()
    duties: Sequence[DutyAssignment] = ()


@dataclass(frozen=True)
class RecapResult:
    days: Tuple[DayStatus, ...] = ()
    summary: RangeSummary = field(default_factory=RangeSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "days": [d.to_dict() for d in self.days],
            "summary": self.summary.to_dict(),
        }
