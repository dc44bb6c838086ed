from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import minutes_of_day, parse_clock_minutes
from ...core.enums import SideCode
from ..model import SideStatus
from .base import SideContext, SideRule


class TimingRule(SideRule):
    """Compare the recorded time against the calendar, in the configured zone.

    No tolerance here: any minute past expected_start is late and any minute
    before expected_end is early. A malformed expectation means NORMAL.
    """

    def decide_in(self, ctx: SideContext) -> Optional[SideStatus]:
        geofence = ctx.record.check_in_geofence_name if ctx.record else None
        if ctx.check_in is None:
            return SideStatus(code=SideCode.MISSING_IN)

        expected = parse_clock_minutes(ctx.calendar_day.expected_start) if ctx.calendar_day else None
        actual = minutes_of_day(ctx.check_in, ctx.zone)
        if expected is not None and actual > expected:
            return SideStatus(code=SideCode.LATE, detail=geofence, minutes=actual - expected)
        return SideStatus(code=SideCode.NORMAL, detail=geofence)

    def decide_out(self, ctx: SideContext) -> Optional[SideStatus]:
        geofence = ctx.record.check_out_geofence_name if ctx.record else None
        if ctx.check_out is None:
            return SideStatus(code=SideCode.MISSING_OUT)

        expected = parse_clock_minutes(ctx.calendar_day.expected_end) if ctx.calendar_day else None
        actual = minutes_of_day(ctx.check_out, ctx.zone)
        early = max(0, expected - actual) if expected is not None else 0
        if early > 0:
            return SideStatus(code=SideCode.EARLY_OUT, detail=f"{early} menit lebih awal", minutes=early)
        return SideStatus(code=SideCode.NORMAL, detail=geofence)
