from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .strategies.base import SideRule
from .strategies.leave_rule import LeaveOverrideRule
from .strategies.missing_rule import MissingBothRule, MissingSideRule
from .strategies.pending_rule import PendingRule
from .strategies.timing_rule import TimingRule


@dataclass
class SideRuleFactory:
    """Factory Pattern: build the per-side precedence chain (first match wins)."""

    def chain(self) -> Tuple[SideRule, ...]:
        return (
            PendingRule(),
            MissingBothRule(),
            MissingSideRule(),
            LeaveOverrideRule(),
            TimingRule(),
        )
