from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import InstantLike


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance session of a subject on one date.

    Timestamps may arrive as datetimes (database) or ISO strings (API payloads);
    they are normalized only when classified. Leave types are raw codes such as
    "NORMAL", "SAKIT" or "DINAS_LUAR".
    """

    work_date: date
    check_in_at: InstantLike = None
    check_out_at: InstantLike = None
    check_in_leave_type: Optional[str] = None
    check_out_leave_type: Optional[str] = None
    check_in_leave_notes: Optional[str] = None
    check_out_leave_notes: Optional[str] = None
    check_in_geofence_name: Optional[str] = None
    check_out_geofence_name: Optional[str] = None
    check_in_distance_m: Optional[float] = None
    check_out_distance_m: Optional[float] = None
    is_manual: bool = False
    manual_note: Optional[str] = None
