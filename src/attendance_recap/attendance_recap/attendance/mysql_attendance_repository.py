from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_subject(self, *, subject_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    work_date, check_in_at, check_out_at,
                    check_in_leave_type, check_out_leave_type,
                    check_in_leave_notes, check_out_leave_notes,
                    g_in.name AS check_in_geofence_name, g_out.name AS check_out_geofence_name,
                    check_in_distance_m, check_out_distance_m,
                    is_manual, manual_note
                FROM attendance_sessions s
                LEFT JOIN geofences g_in ON g_in.id = s.check_in_geofence_id
                LEFT JOIN geofences g_out ON g_out.id = s.check_out_geofence_id
                WHERE s.user_id=%s AND s.work_date BETWEEN %s AND %s
                ORDER BY s.work_date ASC
                """,
                (subject_id, start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    work_date=r["work_date"],
                    check_in_at=r.get("check_in_at"),
                    check_out_at=r.get("check_out_at"),
                    check_in_leave_type=r.get("check_in_leave_type"),
                    check_out_leave_type=r.get("check_out_leave_type"),
                    check_in_leave_notes=r.get("check_in_leave_notes"),
                    check_out_leave_notes=r.get("check_out_leave_notes"),
                    check_in_geofence_name=r.get("check_in_geofence_name"),
                    check_out_geofence_name=r.get("check_out_geofence_name"),
                    check_in_distance_m=r.get("check_in_distance_m"),
                    check_out_distance_m=r.get("check_out_distance_m"),
                    is_manual=bool(r.get("is_manual") or 0),
                    manual_note=r.get("manual_note"),
                )
                for r in rows
            ]
