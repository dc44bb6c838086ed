"""Attendance reconciliation: calendar + attendance + leave + duty -> DayStatus[].

Pure and synchronous. Callers fetch the four sources, compute today in the
organisation zone, and pass everything in a RecapRequest.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import iter_dates, parse_instant
from ..common.labels import is_override, normalize_leave_code
from ..core.enums import InclusionDecision, LeaveStatus, LeaveType, RecapKind, SideCode
from ..duty.projection import duty_label, project_duties
from ..leaves.model import LeaveGrant
from ..workdays.model import CalendarDay
from .aggregator import summarize
from .inclusion import is_reportable, should_evaluate
from .model import DayStatus, RecapRequest, RecapResult, SideStatus
from .side_classifier import classify_sides

logger = logging.getLogger(__name__)

T = TypeVar("T")

_GRANT_TYPES = {t.value for t in LeaveType} - {LeaveType.NORMAL.value}


def _index_by_date(items: Iterable[T], what: str) -> Dict[date, T]:
    out: Dict[date, T] = {}
    for item in items:
        day = item.work_date
        if day in out:
            logger.warning("Duplicate %s for %s ignored", what, day)
            continue
        out[day] = item
    return out


def _grant_order(grant: LeaveGrant) -> Tuple[date, int, int, str]:
    # Numeric ids compare as numbers, anything else after them as text.
    raw = str(grant.leave_id)
    if raw.isdigit():
        return grant.start_date, 0, int(raw), raw
    return grant.start_date, 1, 0, raw


def pick_grants(grants: Sequence[LeaveGrant], *, subject_id: str, start: date, end: date) -> Dict[date, LeaveGrant]:
    """Map each date to the single approved grant covering it.

    Overlaps resolve to the earliest start_date, then the lowest id.
    """
    approved = sorted(
        (g for g in grants if g.status == LeaveStatus.APPROVED and str(g.subject_id) == str(subject_id)),
        key=_grant_order,
    )

    out: Dict[date, LeaveGrant] = {}
    for grant in approved:
        first = max(grant.start_date, start)
        last = min(grant.end_date, end)
        for day in iter_dates(first, last):
            kept = out.get(day)
            if kept is None:
                out[day] = grant
            else:
                logger.warning(
                    "Leave %s overlaps leave %s on %s; keeping %s",
                    grant.leave_id,
                    kept.leave_id,
                    day,
                    kept.leave_id,
                )
    return out


def grant_leave_code(grant: LeaveGrant) -> str:
    """Leave type carried by a grant; NORMAL and unknown codes become IJIN."""
    code = normalize_leave_code(grant.leave_type)
    return code if code in _GRANT_TYPES else LeaveType.IJIN.value


def record_from_grant(day: date, grant: LeaveGrant) -> AttendanceRecord:
    code = grant_leave_code(grant)
    notes = grant.reason or grant.decision_note
    return AttendanceRecord(
        work_date=day,
        check_in_leave_type=code,
        check_out_leave_type=code,
        check_in_leave_notes=notes,
        check_out_leave_notes=notes,
    )


def _has_facts(record: AttendanceRecord) -> bool:
    return (
        parse_instant(record.check_in_at) is not None
        or parse_instant(record.check_out_at) is not None
        or is_override(record.check_in_leave_type)
        or is_override(record.check_out_leave_type)
    )


def effective_record(record: Optional[AttendanceRecord], grant: Optional[LeaveGrant], day: date) -> Optional[AttendanceRecord]:
    """A record with anything on it wins; otherwise an approved grant stands in."""
    if record is not None and (grant is None or _has_facts(record)):
        return record
    if grant is not None:
        return record_from_grant(day, grant)
    return None


def effective_leave_type(record: Optional[AttendanceRecord]) -> Optional[str]:
    if record is None:
        return None
    for raw in (record.check_in_leave_type, record.check_out_leave_type):
        if is_override(raw):
            return normalize_leave_code(raw)
    return None


def day_kind(
    in_status: SideStatus,
    out_status: SideStatus,
    *,
    leave_type: Optional[str],
    has_duty: bool,
) -> RecapKind:
    """Coarse kind for tables and calendars.

    Duty only matters when nothing was recorded; it never hides a late,
    early or missing side.
    """
    if in_status.code == SideCode.PENDING_TODAY:
        return RecapKind.PENDING
    if leave_type is not None:
        return RecapKind.ON_LEAVE
    if in_status.code == SideCode.MISSING_BOTH:
        return RecapKind.ON_DUTY if has_duty else RecapKind.ABSENT
    if in_status.code == SideCode.MISSING_IN:
        return RecapKind.MISSING_IN
    if out_status.code == SideCode.MISSING_OUT:
        return RecapKind.MISSING_OUT
    if in_status.code == SideCode.LATE:
        return RecapKind.LATE
    if out_status.code == SideCode.EARLY_OUT:
        return RecapKind.EARLY_LEAVE
    return RecapKind.PRESENT


def reconcile(request: RecapRequest) -> RecapResult:
    if request.start > request.end:
        return RecapResult()

    calendar: Dict[date, CalendarDay] = _index_by_date(request.calendar, "calendar day")
    records: Dict[date, AttendanceRecord] = _index_by_date(request.records, "attendance record")
    grants = pick_grants(request.grants, subject_id=request.subject_id, start=request.start, end=request.end)
    duties = project_duties(request.duties, start=request.start, end=request.end, zone=request.zone)
    has_calendar = any(request.start <= d <= request.end for d in calendar)

    days: List[DayStatus] = []
    for day in iter_dates(request.start, request.end):
        decision = should_evaluate(day, request.today, request.show_today)
        if decision == InclusionDecision.EXCLUDE:
            continue

        cal = calendar.get(day)
        record = records.get(day)
        grant = grants.get(day)
        duty_set = duties.get(day, frozenset())

        if cal is None:
            # Days off the calendar only show when no calendar was generated for the range.
            if has_calendar or (record is None and grant is None and not duty_set):
                continue
        elif not is_reportable(
            cal.day_type,
            has_duty=bool(duty_set),
            has_record=record is not None,
            has_grant=grant is not None,
        ):
            continue

        effective = effective_record(record, grant, day)
        in_status, out_status = classify_sides(
            effective,
            cal,
            zone=request.zone,
            pending=decision == InclusionDecision.PENDING,
        )
        leave_type = effective_leave_type(effective)

        days.append(
            DayStatus(
                work_date=day,
                kind=day_kind(in_status, out_status, leave_type=leave_type, has_duty=bool(duty_set)),
                in_status=in_status,
                out_status=out_status,
                late_minutes=in_status.minutes if in_status.code == SideCode.LATE else None,
                early_minutes=out_status.minutes if out_status.code == SideCode.EARLY_OUT else None,
                has_duty=bool(duty_set),
                duty_label=duty_label(duty_set),
                is_manual=bool(effective and effective.is_manual),
                manual_note=effective.manual_note if effective and effective.is_manual else None,
                day_type=cal.day_type if cal else None,
                has_check_in=bool(effective and parse_instant(effective.check_in_at)),
                has_check_out=bool(effective and parse_instant(effective.check_out_at)),
                leave_type=leave_type,
            )
        )

    summary = summarize(days)
    logger.debug("Reconciled %s %s..%s: %d day(s)", request.subject_id, request.start, request.end, len(days))
    return RecapResult(days=tuple(days), summary=summary)
