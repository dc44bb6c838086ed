from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..core.enums import LeaveType, SideCode
from .model import DayStatus, RangeSummary

_LEAVE_COUNTERS = {
    LeaveType.DINAS_LUAR.value: "dinas_luar",
    LeaveType.WFA.value: "wfa",
    LeaveType.WFH.value: "wfh",
    LeaveType.IJIN.value: "ijin",
    LeaveType.SAKIT.value: "sakit",
    LeaveType.CUTI.value: "cuti",
}


def _code(status) -> SideCode | None:
    return status.code if status is not None else None


def summarize(days: Iterable[DayStatus]) -> RangeSummary:
    """Fold classified days into range counters.

    Counters overlap: a late day is also present. Pending days are skipped.
    """
    counts: Counter = Counter()
    for day in days:
        if day.is_pending:
            continue

        working = day.day_type is not None and day.day_type.is_working
        if working:
            counts["total_working_days"] += 1

        if day.leave_type is not None:
            counts["present"] += 1
            counter = _LEAVE_COUNTERS.get(day.leave_type)
            if counter:
                counts[counter] += 1
            continue

        if not day.has_check_in and not day.has_check_out:
            if working:
                counts["absent_no_record"] += 1
            continue

        counts["present"] += 1
        if _code(day.in_status) == SideCode.MISSING_IN:
            counts["missing_in"] += 1
        if _code(day.in_status) == SideCode.LATE:
            counts["late"] += 1
        if _code(day.out_status) == SideCode.MISSING_OUT:
            counts["missing_out"] += 1
        if _code(day.out_status) == SideCode.EARLY_OUT:
            counts["early_out"] += 1

    return RangeSummary(**counts)
