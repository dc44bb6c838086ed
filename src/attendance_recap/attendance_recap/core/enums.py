from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for leave decisions and badge scoping."""

    SUPERADMIN = "SUPERADMIN"
    SATKER_ADMIN = "SATKER_ADMIN"
    SATKER_HEAD = "SATKER_HEAD"
    MEMBER = "MEMBER"


class DayType(str, Enum):
    """Calendar day type generated per org unit (satker)."""

    WORKDAY = "WORKDAY"
    HALF_DAY = "HALF_DAY"
    HOLIDAY = "HOLIDAY"

    @property
    def is_working(self) -> bool:
        return self in {DayType.WORKDAY, DayType.HALF_DAY}


class LeaveType(str, Enum):
    """Per-side attendance override. NORMAL means "evaluate time rules"."""

    NORMAL = "NORMAL"
    DINAS_LUAR = "DINAS_LUAR"
    WFA = "WFA"
    WFH = "WFH"
    IJIN = "IJIN"
    SAKIT = "SAKIT"
    CUTI = "CUTI"


class LeaveStatus(str, Enum):
    """Leave request workflow state. Only APPROVED takes part in a recap."""

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class InclusionDecision(str, Enum):
    EVALUATE = "EVALUATE"
    PENDING = "PENDING"
    EXCLUDE = "EXCLUDE"


class SideCode(str, Enum):
    """Status of one side (check-in or check-out) of a day."""

    PENDING_TODAY = "PENDING_TODAY"
    MISSING_IN = "MISSING_IN"
    MISSING_OUT = "MISSING_OUT"
    MISSING_BOTH = "MISSING_BOTH"
    LEAVE = "LEAVE"
    LATE = "LATE"
    EARLY_OUT = "EARLY_OUT"
    NORMAL = "NORMAL"


class RecapKind(str, Enum):
    """Coarse per-day kind emitted with a recap row."""

    PENDING = "PENDING"
    PRESENT = "PRESENT"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    MISSING_IN = "MISSING_IN"
    MISSING_OUT = "MISSING_OUT"
    ON_LEAVE = "ON_LEAVE"
    ON_DUTY = "ON_DUTY"
    ABSENT = "ABSENT"


class DayKind(str, Enum):
    """Kind used by the allowance (Tukin) breakdown."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LEAVE = "LEAVE"
    DUTY = "DUTY"
    OTHER = "OTHER"
