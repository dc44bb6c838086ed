from __future__ import annotations

import logging
import time
from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import resolve_zone, today_in_zone
from ..core.constants import DEFAULT_TIMEZONE, TIMEZONE_CACHE_TTL_SECONDS
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class TimezoneService:
    """Organisation time zone, read from settings and cached for a few minutes."""

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        default_timezone: str = DEFAULT_TIMEZONE,
        ttl_seconds: int = TIMEZONE_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._settings = settings
        self._default = default_timezone
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._cached: Optional[tuple[float, ZoneInfo]] = None

    def get_zone(self) -> ZoneInfo:
        now = self._clock()
        if self._cached is not None and (now - self._cached[0]) <= self._ttl:
            return self._cached[1]

        zone = resolve_zone(self._settings.get_timezone(), default=self._default)
        logger.debug("Timezone resolved to %s", zone.key)
        self._cached = (now, zone)
        return zone

    def set_cached(self, name: str) -> ZoneInfo:
        """Refresh the cache right after an administrator changes the zone."""
        zone = resolve_zone(name, default=self._default)
        self._cached = (self._clock(), zone)
        return zone

    def today(self, *, now: Optional[datetime] = None) -> date:
        return today_in_zone(self.get_zone(), now=now)
