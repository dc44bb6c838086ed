from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayType


@dataclass(frozen=True)
class CalendarDay:
    """Domain entity: one generated calendar day of an org unit (satker).

    expected_start / expected_end are kept as "HH:MM[:SS]" text, exactly as the
    calendar generator stores them; parsing happens at comparison time.
    """

    work_date: date
    day_type: DayType
    expected_start: Optional[str] = None
    expected_end: Optional[str] = None
    note: Optional[str] = None
