from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import local_day_bounds_utc, today_in_zone
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..duty.repository import DutyRepository
from ..leaves.repository import LeaveRepository
from ..settings.service import TimezoneService
from ..workdays.repository import CalendarRepository
from .engine import reconcile
from .model import RecapRequest, RecapResult

logger = logging.getLogger(__name__)


class RecapService:
    """Fetch the four fact sources for one subject and reconcile them."""

    def __init__(
        self,
        calendar: CalendarRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        duties: DutyRepository,
        timezones: TimezoneService,
    ):
        self._calendar = calendar
        self._attendance = attendance
        self._leaves = leaves
        self._duties = duties
        self._timezones = timezones

    def recap(
        self,
        *,
        subject_id: str,
        org_unit_id: str,
        start: date,
        end: date,
        show_today: bool = False,
        now: Optional[datetime] = None,
    ) -> RecapResult:
        if start > end:
            raise ValidationError("Start date must not be after end date")

        zone = self._timezones.get_zone()
        today = today_in_zone(zone, now=now)

        # Nothing after today is ever shown; today only when asked for.
        cap = today if show_today else today - timedelta(days=1)
        end = min(end, cap)
        if start > end:
            logger.info("Recap range for %s starts after %s, nothing to show", subject_id, cap)
            return RecapResult()

        calendar = self._calendar.list_for_org_unit(org_unit_id=org_unit_id, start_date=start, end_date=end)
        records = self._attendance.list_for_subject(subject_id=subject_id, start_date=start, end_date=end)
        grants = [
            g
            for g in self._leaves.list_in_range(start_date=start, end_date=end, status=LeaveStatus.APPROVED)
            if str(g.subject_id) == str(subject_id) and str(g.org_unit_id) == str(org_unit_id)
        ]
        lo, hi = local_day_bounds_utc(start, end, zone)
        duties = self._duties.list_for_subject(subject_id=subject_id, start_at=lo, end_at=hi)

        result = reconcile(
            RecapRequest(
                subject_id=subject_id,
                start=start,
                end=end,
                today=today,
                zone=zone,
                show_today=show_today,
                calendar=calendar,
                records=records,
                grants=grants,
                duties=duties,
            )
        )
        logger.info(
            "Recap %s (%s) %s..%s tz=%s: %d day(s)",
            subject_id,
            org_unit_id,
            start,
            end,
            zone.key,
            len(result.days),
        )
        return result
