from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ...attendance.model import AttendanceRecord
from ...common.labels import is_override, normalize_leave_code
from ...workdays.model import CalendarDay
from ..model import SideStatus


@dataclass(frozen=True)
class SideContext:
    """Inputs shared by every side rule for one date.

    check_in / check_out are already parsed; an unparseable timestamp is None.
    """

    record: Optional[AttendanceRecord]
    calendar_day: Optional[CalendarDay]
    zone: ZoneInfo
    pending: bool
    check_in: Optional[datetime]
    check_out: Optional[datetime]

    @property
    def in_override(self) -> Optional[str]:
        code = normalize_leave_code(self.record.check_in_leave_type) if self.record else None
        return code if is_override(code) else None

    @property
    def out_override(self) -> Optional[str]:
        code = normalize_leave_code(self.record.check_out_leave_type) if self.record else None
        return code if is_override(code) else None


class SideRule(ABC):
    """Strategy Pattern: one step of the per-side precedence chain.

    Returning None passes the side on to the next rule.
    """

    @abstractmethod
    def decide_in(self, ctx: SideContext) -> Optional[SideStatus]:
        raise NotImplementedError

    @abstractmethod
    def decide_out(self, ctx: SideContext) -> Optional[SideStatus]:
        raise NotImplementedError
