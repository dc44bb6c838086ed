from __future__ import annotations

from typing import Optional

from ...core.enums import SideCode
from ..model import SideStatus
from .base import SideContext, SideRule


class PendingRule(SideRule):
    """Today, not yet over: both sides pending."""

    def decide_in(self, ctx: SideContext) -> Optional[SideStatus]:
        return SideStatus(code=SideCode.PENDING_TODAY) if ctx.pending else None

    def decide_out(self, ctx: SideContext) -> Optional[SideStatus]:
        return SideStatus(code=SideCode.PENDING_TODAY) if ctx.pending else None
