from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveGrant
from .repository import LeaveRepository

_COLUMNS = """
    id, user_id, satker_id, tipe, start_date, end_date, status,
    reason, decision_note, decided_by, decided_at
"""


def _to_grant(r: Dict[str, Any]) -> LeaveGrant:
    return LeaveGrant(
        leave_id=str(r["id"]),
        subject_id=str(r["user_id"]),
        org_unit_id=str(r["satker_id"]),
        leave_type=r["tipe"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        status=LeaveStatus(r["status"]),
        reason=r.get("reason"),
        decision_note=r.get("decision_note"),
        decided_by=str(r["decided_by"]) if r.get("decided_by") else None,
        decided_at=r.get("decided_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveGrant]:
        clauses = ["start_date <= %s", "end_date >= %s"]
        params: list[object] = [end_date, start_date]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_requests
                WHERE {where}
                ORDER BY start_date ASC, id ASC
                """,
                tuple(params),
            )
            return [_to_grant(r) for r in fetchall(cur)]

    def count_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        status: LeaveStatus,
        subject_id: Optional[str] = None,
        org_unit_id: Optional[str] = None,
    ) -> int:
        clauses = ["start_date <= %s", "end_date >= %s", "status=%s"]
        params: list[object] = [end_date, start_date, status.value]
        if subject_id is not None:
            clauses.append("user_id=%s")
            params.append(subject_id)
        if org_unit_id is not None:
            clauses.append("satker_id=%s")
            params.append(org_unit_id)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM leave_requests WHERE {where}", tuple(params))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def get_by_id(self, leave_id: str) -> Optional[LeaveGrant]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE id=%s", (leave_id,))
            r = fetchone(cur)
            return _to_grant(r) if r else None

    def decide(
        self,
        *,
        leave_id: str,
        status: LeaveStatus,
        decided_by: str,
        decision_note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, decided_by=%s, decision_note=%s, decided_at=UTC_TIMESTAMP()
                WHERE id=%s AND status=%s
                """,
                (status.value, decided_by, decision_note, leave_id, LeaveStatus.SUBMITTED.value),
            )
            return cur.rowcount > 0
