from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import DutyAssignment


class DutyRepository(Protocol):
    def list_for_subject(self, *, subject_id: str, start_at: datetime, end_at: datetime) -> Sequence[DutyAssignment]:
        """Assignments overlapping [start_at, end_at)."""

        raise NotImplementedError
