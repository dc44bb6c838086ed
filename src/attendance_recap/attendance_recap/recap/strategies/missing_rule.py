from __future__ import annotations

from typing import Optional

from ...core.enums import SideCode
from ..model import SideStatus
from .base import SideContext, SideRule


class MissingBothRule(SideRule):
    """No check-in, no check-out and no leave override on either side."""

    def _applies(self, ctx: SideContext) -> bool:
        if ctx.check_in is not None or ctx.check_out is not None:
            return False
        return ctx.in_override is None and ctx.out_override is None

    def decide_in(self, ctx: SideContext) -> Optional[SideStatus]:
        return SideStatus(code=SideCode.MISSING_BOTH) if self._applies(ctx) else None

    def decide_out(self, ctx: SideContext) -> Optional[SideStatus]:
        return SideStatus(code=SideCode.MISSING_BOTH) if self._applies(ctx) else None


class MissingSideRule(SideRule):
    """One side recorded, the other not."""

    def decide_in(self, ctx: SideContext) -> Optional[SideStatus]:
        if ctx.check_out is not None and ctx.check_in is None:
            return SideStatus(code=SideCode.MISSING_IN)
        return None

    def decide_out(self, ctx: SideContext) -> Optional[SideStatus]:
        if ctx.check_in is not None and ctx.check_out is None:
            return SideStatus(code=SideCode.MISSING_OUT)
        return None
