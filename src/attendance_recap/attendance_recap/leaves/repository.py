from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveGrant


class LeaveRepository(Protocol):
    def list_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveGrant]:
        """Grants overlapping start_date..end_date."""

        raise NotImplementedError

    def count_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        status: LeaveStatus,
        subject_id: Optional[str] = None,
        org_unit_id: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, leave_id: str) -> Optional[LeaveGrant]:
        raise NotImplementedError

    def decide(
        self,
        *,
        leave_id: str,
        status: LeaveStatus,
        decided_by: str,
        decision_note: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
