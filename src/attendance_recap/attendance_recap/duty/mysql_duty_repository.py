from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import DutyAssignment
from .repository import DutyRepository


def _naive_utc(value: datetime) -> datetime:
    # DATETIME columns hold naive UTC.
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class MySQLDutyRepository(DutyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_subject(self, *, subject_id: str, start_at: datetime, end_at: datetime) -> Sequence[DutyAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, satker_id, start_at, end_at, title, schedule_type, note
                FROM duty_schedules
                WHERE user_id=%s AND start_at < %s AND end_at >= %s
                ORDER BY start_at ASC, id ASC
                """,
                (subject_id, _naive_utc(end_at), _naive_utc(start_at)),
            )
            rows = fetchall(cur)
            return [
                DutyAssignment(
                    duty_id=str(r["id"]),
                    subject_id=str(r["user_id"]),
                    org_unit_id=str(r["satker_id"]),
                    start_at=r["start_at"],
                    end_at=r["end_at"],
                    title=r.get("title"),
                    schedule_type=r.get("schedule_type") or "",
                    note=r.get("note"),
                )
                for r in rows
            ]
