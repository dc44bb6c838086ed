from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import CalendarDay


class CalendarRepository(Protocol):
    def list_for_org_unit(self, *, org_unit_id: str, start_date: date, end_date: date) -> Sequence[CalendarDay]:
        raise NotImplementedError
