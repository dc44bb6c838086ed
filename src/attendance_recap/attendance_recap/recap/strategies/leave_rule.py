from __future__ import annotations

from typing import Optional

from ...common.labels import leave_label
from ...core.enums import SideCode
from ..model import SideStatus
from .base import SideContext, SideRule


class LeaveOverrideRule(SideRule):
    """A side carrying a non-NORMAL leave type is not time-evaluated."""

    def decide_in(self, ctx: SideContext) -> Optional[SideStatus]:
        if ctx.in_override is None:
            return None
        return SideStatus(
            code=SideCode.LEAVE,
            label=leave_label(ctx.in_override),
            detail=ctx.record.check_in_leave_notes if ctx.record else None,
        )

    def decide_out(self, ctx: SideContext) -> Optional[SideStatus]:
        if ctx.out_override is None:
            return None
        return SideStatus(
            code=SideCode.LEAVE,
            label=leave_label(ctx.out_override),
            detail=ctx.record.check_out_leave_notes if ctx.record else None,
        )
