from __future__ import annotations

from datetime import datetime

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import AnalyticsRepository

_LIVE_RECORDS = """
    FROM attendance_records a
    JOIN training_sessions s ON s.session_id = a.training_session_id
    WHERE s.deleted_at IS NULL
"""


class MySQLAnalyticsRepository(AnalyticsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _scalar(self, sql: str, params: tuple = ()) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            row = fetchone(cur)
            return int(row["n"] or 0) if row else 0

    def count_sessions(self) -> int:
        return self._scalar("SELECT COUNT(*) AS n FROM training_sessions WHERE deleted_at IS NULL")

    def count_distinct_participants(self) -> int:
        return self._scalar("SELECT COUNT(DISTINCT a.user_id) AS n" + _LIVE_RECORDS)

    def count_records(self, *, status: str | None = None) -> int:
        if status is None:
            return self._scalar("SELECT COUNT(*) AS n" + _LIVE_RECORDS)
        return self._scalar("SELECT COUNT(*) AS n" + _LIVE_RECORDS + " AND a.status=%s", (status,))

    def count_sessions_starting_after(self, moment: datetime) -> int:
        return self._scalar(
            "SELECT COUNT(*) AS n FROM training_sessions WHERE deleted_at IS NULL AND start_time > %s",
            (moment,),
        )
