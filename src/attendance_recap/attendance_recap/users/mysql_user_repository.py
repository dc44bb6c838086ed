from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_org_unit_id(self, subject_id: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT satker_id FROM users WHERE id=%s", (subject_id,))
            r = fetchone(cur)
            if not r or r.get("satker_id") is None:
                return None
            return str(r["satker_id"])
