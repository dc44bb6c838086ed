from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import CalendarDay
from .repository import CalendarRepository


def _time_text(value: Any) -> Optional[str]:
    t = normalize_mysql_time(value)
    return t.strftime("%H:%M:%S") if t else None


class MySQLCalendarRepository(CalendarRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_org_unit(self, *, org_unit_id: str, start_date: date, end_date: date) -> Sequence[CalendarDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, day_type, expected_start, expected_end, note
                FROM work_calendar_days
                WHERE satker_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (org_unit_id, start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                CalendarDay(
                    work_date=r["work_date"],
                    day_type=DayType(r["day_type"]),
                    expected_start=_time_text(r.get("expected_start")),
                    expected_end=_time_text(r.get("expected_end")),
                    note=r.get("note"),
                )
                for r in rows
            ]
