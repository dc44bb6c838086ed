from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import parse_month
from ..core.exceptions import NotFoundError, ValidationError
from ..settings.service import TimezoneService
from .day_kind import classify_day, filter_reportable_days
from .model import TukinCalculation
from .repository import TukinRepository


@dataclass(frozen=True)
class TukinRowUI:
    work_date: str
    kind: str
    label: str
    check_in_at: Optional[str]
    check_out_at: Optional[str]
    earned_credit: float
    expected_unit: float


class TukinService:
    def __init__(self, tukin: TukinRepository, timezones: TimezoneService):
        self._tukin = tukin
        self._timezones = timezones

    def get_calculation(self, *, subject_id: str, month: str) -> TukinCalculation:
        try:
            parse_month(month)
        except ValueError as e:
            raise ValidationError("Month must be YYYY-MM") from e

        calc = self._tukin.get_for_subject(subject_id=subject_id, month=month)
        if calc is None:
            raise NotFoundError("Tukin has not been generated for this month yet")
        return calc

    def breakdown_rows(self, subject_id: str, month: str, *, now: Optional[datetime] = None) -> List[TukinRowUI]:
        return self.rows_for(self.get_calculation(subject_id=subject_id, month=month), now=now)

    def rows_for(self, calc: TukinCalculation, *, now: Optional[datetime] = None) -> List[TukinRowUI]:
        """Classified rows of an already loaded calculation."""
        if calc.breakdown is None:
            return []

        today = self._timezones.today(now=now)
        rows: List[TukinRowUI] = []
        for day in filter_reportable_days(calc.breakdown.days, today=today):
            result = classify_day(day)
            rows.append(
                TukinRowUI(
                    work_date=day.work_date,
                    kind=result.kind.value,
                    label=result.label,
                    check_in_at=day.check_in_at,
                    check_out_at=day.check_out_at,
                    earned_credit=day.earned_credit,
                    expected_unit=day.expected_unit,
                )
            )
        return rows
