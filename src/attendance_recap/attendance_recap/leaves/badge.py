from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from ..core.constants import LEAVE_BADGE_TTL_SECONDS, LEAVE_BADGE_WINDOW_DAYS
from ..core.enums import LeaveStatus, Role
from .events import LeaveChanged, LeaveEventChannel
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BadgeViewer:
    subject_id: str
    org_unit_id: Optional[str]
    role: Role


class LeaveBadgeCounter:
    """Count of SUBMITTED leave requests around today, cached with a short TTL.

    A SATKER_HEAD sees every submitted request of the unit; everyone else, and
    a head without a unit, only their own. Any published leave change
    invalidates the cache, so the next read refetches; missed events are
    covered by the TTL.
    """

    def __init__(
        self,
        leaves: LeaveRepository,
        channel: LeaveEventChannel,
        *,
        today_provider: Callable[[], date],
        ttl_seconds: int = LEAVE_BADGE_TTL_SECONDS,
        window_days: int = LEAVE_BADGE_WINDOW_DAYS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._leaves = leaves
        self._today = today_provider
        self._ttl = float(ttl_seconds)
        self._window = int(window_days)
        self._clock = clock
        self._cache: dict[BadgeViewer, tuple[float, int]] = {}
        self._subscription = channel.subscribe(self._on_leave_changed)

    def _on_leave_changed(self, event: LeaveChanged) -> None:
        logger.debug("Leave %s changed to %s, dropping badge cache", event.leave_id, event.status.value)
        self._cache.clear()

    def reset(self) -> None:
        """Forget cached counts, e.g. when the logged-in user changes."""
        self._cache.clear()

    def close(self) -> None:
        self._subscription.close()

    def count(self, viewer: BadgeViewer, *, force: bool = False) -> int:
        now = self._clock()
        cached = self._cache.get(viewer)
        if not force and cached is not None and (now - cached[0]) <= self._ttl:
            return cached[1]

        today = self._today()
        start = today - timedelta(days=self._window)
        end = today + timedelta(days=self._window)

        if viewer.role == Role.SATKER_HEAD and viewer.org_unit_id:
            total = self._leaves.count_in_range(
                start_date=start,
                end_date=end,
                status=LeaveStatus.SUBMITTED,
                org_unit_id=viewer.org_unit_id,
            )
        else:
            total = self._leaves.count_in_range(
                start_date=start,
                end_date=end,
                status=LeaveStatus.SUBMITTED,
                subject_id=viewer.subject_id,
            )

        self._cache[viewer] = (now, int(total))
        return int(total)
