from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveGrant:
    """Domain entity: a leave request covering start_date..end_date (inclusive)."""

    leave_id: str
    subject_id: str
    org_unit_id: str
    leave_type: str
    start_date: date
    end_date: date
    status: LeaveStatus
    reason: Optional[str] = None
    decision_note: Optional[str] = None
    decided_by: Optional[str] = None
    decided_at: Optional[datetime] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
