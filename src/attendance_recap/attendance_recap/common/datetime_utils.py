from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)

InstantLike = Union[datetime, str, None]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> tuple[date, date]:
    """Parse YYYY-MM into the first and last day of that month."""
    first = datetime.strptime(value, "%Y-%m").date()
    next_first = (first.replace(day=28) + timedelta(days=4)).replace(day=1)
    return first, next_first - timedelta(days=1)


def now_utc() -> datetime:
    """Current aware UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def resolve_zone(name: Optional[str], *, default: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    raw = (name or "").strip() or default
    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to %s", raw, default)
        return ZoneInfo(default)


def today_in_zone(zone: ZoneInfo, *, now: Optional[datetime] = None) -> date:
    return (now or now_utc()).astimezone(zone).date()


def parse_clock_minutes(value: Union[str, time, None]) -> Optional[int]:
    """Parse "HH:MM" or "HH:MM:SS" into minutes of day.

    Returns None for missing or malformed input (no expectation).
    """
    if value is None:
        return None
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = value.strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hh = int(parts[0])
        mm = int(parts[1])
    except ValueError:
        return None
    if not (0 <= hh < 24 and 0 <= mm < 60):
        return None
    return hh * 60 + mm


def parse_instant(value: InstantLike) -> Optional[datetime]:
    """Normalize a stored timestamp into an aware UTC datetime.

    - aware datetime: converted to UTC
    - naive datetime: assumed UTC (backend stores UTC)
    - ISO-8601 string, "Z" suffix allowed
    Anything unparseable yields None, i.e. "no event on that side".
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            logger.debug("Ignoring unparseable timestamp %r", value)
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def minutes_of_day(instant: datetime, zone: ZoneInfo) -> int:
    local = instant.astimezone(zone)
    return local.hour * 60 + local.minute


def local_date(instant: datetime, zone: ZoneInfo) -> date:
    return instant.astimezone(zone).date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end (inclusive)."""
    cur = start
    while cur <= end:
        yield cur
        cur += timedelta(days=1)


def local_day_bounds_utc(start: date, end: date, zone: ZoneInfo) -> tuple[datetime, datetime]:
    """Instant range covering local dates start..end, end exclusive."""
    lo = datetime.combine(start, time.min, tzinfo=zone)
    hi = datetime.combine(end + timedelta(days=1), time.min, tzinfo=zone)
    return lo.astimezone(timezone.utc), hi.astimezone(timezone.utc)
