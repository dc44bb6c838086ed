from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import TukinBreakdown, TukinCalculation
from .repository import TukinRepository

logger = logging.getLogger(__name__)


def _breakdown(raw: Any) -> Optional[TukinBreakdown]:
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning("Stored tukin breakdown is not valid JSON")
            return None
    if not isinstance(raw, dict):
        return None
    return TukinBreakdown.from_payload(raw)


class MySQLTukinRepository(TukinRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_subject(self, *, subject_id: str, month: str) -> Optional[TukinCalculation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT month, user_id, satker_id, base_tukin, expected_units, earned_credit,
                       attendance_ratio, final_tukin, breakdown, updated_at
                FROM tukin_calculations
                WHERE user_id=%s AND month=%s
                """,
                (subject_id, month),
            )
            r = fetchone(cur)
            if not r:
                return None
            return TukinCalculation(
                month=str(r["month"]),
                subject_id=str(r["user_id"]),
                org_unit_id=str(r["satker_id"]),
                base_tukin=int(r["base_tukin"] or 0),
                expected_units=float(r["expected_units"] or 0),
                earned_credit=float(r["earned_credit"] or 0),
                attendance_ratio=float(r["attendance_ratio"] or 0),
                final_tukin=int(r["final_tukin"] or 0),
                breakdown=_breakdown(r.get("breakdown")),
                updated_at=r.get("updated_at"),
            )
