from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import parse_instant
from ..core.constants import DUTY_LABEL_SEPARATOR, DUTY_TITLE_FALLBACK
from .model import DutyAssignment

logger = logging.getLogger(__name__)


def _local_span(duty: DutyAssignment, zone: ZoneInfo) -> Optional[tuple[date, date]]:
    start = parse_instant(duty.start_at)
    if start is None:
        logger.warning("Duty %s has no usable start_at, skipped", duty.duty_id)
        return None
    end = parse_instant(duty.end_at)
    if end is None or end < start:
        end = start

    first = start.astimezone(zone).date()
    local_end = end.astimezone(zone)
    last = local_end.date()
    # An assignment ending exactly at local midnight does not touch that day.
    if end > start and local_end.time() == time.min:
        last -= timedelta(days=1)
    return first, max(first, last)


def project_duties(
    duties: Iterable[DutyAssignment],
    *,
    start: date,
    end: date,
    zone: ZoneInfo,
) -> dict[date, frozenset]:
    """Map every local date in start..end to the set of duties overlapping it."""
    out: dict[date, set] = {}
    for duty in duties:
        span = _local_span(duty, zone)
        if span is None:
            continue
        cur = max(span[0], start)
        last = min(span[1], end)
        while cur <= last:
            out.setdefault(cur, set()).add(duty)
            cur += timedelta(days=1)
    return {d: frozenset(items) for d, items in out.items()}


def _sort_key(duty: DutyAssignment) -> tuple[datetime, str]:
    start = parse_instant(duty.start_at) or datetime.min.replace(tzinfo=timezone.utc)
    return start, duty.duty_id


def duty_label(duties: Iterable[DutyAssignment]) -> Optional[str]:
    """Deduplicated titles joined for display, in start order; None when empty."""
    titles: list[str] = []
    for duty in sorted(duties, key=_sort_key):
        title = (duty.title or "").strip() or (duty.schedule_type or "").strip() or DUTY_TITLE_FALLBACK
        if title not in titles:
            titles.append(title)
    return DUTY_LABEL_SEPARATOR.join(titles) if titles else None
