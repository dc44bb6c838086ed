from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import DayType, InclusionDecision


def should_evaluate(day: date, today: date, show_today: bool) -> InclusionDecision:
    """Decide whether a date is classified, shown as pending, or left out.

    Future dates are always excluded. Today is pending only when show_today.
    """
    if day > today:
        return InclusionDecision.EXCLUDE
    if day == today:
        return InclusionDecision.PENDING if show_today else InclusionDecision.EXCLUDE
    return InclusionDecision.EVALUATE


def is_reportable(
    day_type: Optional[DayType],
    *,
    has_duty: bool,
    has_record: bool,
    has_grant: bool,
) -> bool:
    """A holiday with nothing on it is not a reportable day at all."""
    if day_type != DayType.HOLIDAY:
        return True
    return has_duty or has_record or has_grant
