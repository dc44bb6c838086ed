from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_instant
from ..workdays.model import CalendarDay
from .factory import SideRuleFactory
from .model import SideStatus
from .strategies.base import SideContext, SideRule

_DEFAULT_CHAIN: Tuple[SideRule, ...] = SideRuleFactory().chain()


def build_context(
    record: Optional[AttendanceRecord],
    calendar_day: Optional[CalendarDay],
    *,
    zone: ZoneInfo,
    pending: bool,
) -> SideContext:
    return SideContext(
        record=record,
        calendar_day=calendar_day,
        zone=zone,
        pending=pending,
        check_in=parse_instant(record.check_in_at) if record else None,
        check_out=parse_instant(record.check_out_at) if record else None,
    )


def _mark_manual(status: SideStatus, record: Optional[AttendanceRecord]) -> SideStatus:
    if record is None or not record.is_manual:
        return status
    return replace(status, manual=True, manual_note=record.manual_note)


def classify_sides(
    record: Optional[AttendanceRecord],
    calendar_day: Optional[CalendarDay],
    *,
    zone: ZoneInfo,
    pending: bool,
    rules: Sequence[SideRule] = _DEFAULT_CHAIN,
) -> Tuple[SideStatus, SideStatus]:
    """Classify the in-side and out-side of one date independently."""
    ctx = build_context(record, calendar_day, zone=zone, pending=pending)

    in_status = next(s for s in (r.decide_in(ctx) for r in rules) if s is not None)
    out_status = next(s for s in (r.decide_out(ctx) for r in rules) if s is not None)
    return _mark_manual(in_status, record), _mark_manual(out_status, record)
