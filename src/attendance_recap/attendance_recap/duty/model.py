from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import InstantLike


@dataclass(frozen=True)
class DutyAssignment:
    """Domain entity: a scheduled duty (e.g. guard shift) as an instant range.

    May span midnight and may overlap other assignments of the same subject.
    """

    duty_id: str
    subject_id: str
    org_unit_id: str
    start_at: InstantLike
    end_at: InstantLike
    schedule_type: str
    title: Optional[str] = None
    note: Optional[str] = None
