from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, transaction
from ..sessions.model import TrainingSession
from ..sessions.mysql_session_repository import to_roster_entry
from .model import AttendanceRecord, AttendanceWithUser
from .repository import AttendanceRepository, RegistrationOutcome


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def register(self, *, session_id: int, user_id: int) -> RegistrationOutcome:
        with transaction(self._conn_factory) as (_, cur):
            # Row lock on the session serializes registrations for it until commit.
            cur.execute(
                """
                SELECT session_id, max_participants
                FROM training_sessions
                WHERE session_id=%s AND deleted_at IS NULL
                FOR UPDATE
                """,
                (int(session_id),),
            )
            session_row = fetchone(cur)
            if not session_row:
                return RegistrationOutcome.SESSION_NOT_FOUND

            cur.execute("SELECT user_id FROM users WHERE user_id=%s LOCK IN SHARE MODE", (int(user_id),))
            if not fetchone(cur):
                return RegistrationOutcome.USER_NOT_FOUND

            cur.execute(
                "SELECT record_id FROM attendance_records WHERE training_session_id=%s AND user_id=%s",
                (int(session_id), int(user_id)),
            )
            if fetchone(cur):
                return RegistrationOutcome.ALREADY_REGISTERED

            cur.execute(
                "SELECT COUNT(*) AS n FROM attendance_records WHERE training_session_id=%s",
                (int(session_id),),
            )
            if int(fetchone(cur)["n"]) >= int(session_row["max_participants"]):
                return RegistrationOutcome.SESSION_FULL

            try:
                cur.execute(
                    """
                    INSERT INTO attendance_records(training_session_id, user_id, status)
                    VALUES(%s,%s,%s)
                    """,
                    (int(session_id), int(user_id), AttendanceStatus.REGISTERED.value),
                )
            except IntegrityError as exc:
                if is_duplicate_key(exc):
                    return RegistrationOutcome.ALREADY_REGISTERED
                raise
            return RegistrationOutcome.REGISTERED

    def remove(self, *, session_id: int, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_records WHERE training_session_id=%s AND user_id=%s",
                (int(session_id), int(user_id)),
            )
            return cur.rowcount > 0

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, training_session_id, user_id, status, updated_at
                FROM attendance_records
                WHERE record_id=%s
                """,
                (int(record_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                record_id=int(r["record_id"]),
                training_session_id=int(r["training_session_id"]),
                user_id=int(r["user_id"]),
                status=AttendanceStatus(r["status"]),
                updated_at=r.get("updated_at"),
            )

    def get_with_user(self, record_id: int) -> Optional[AttendanceWithUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.record_id, a.training_session_id, a.user_id, a.status, a.updated_at,
                       u.name, u.email, u.password_hash, u.role
                FROM attendance_records a
                JOIN users u ON u.user_id = a.user_id
                WHERE a.record_id=%s
                """,
                (int(record_id),),
            )
            r = fetchone(cur)
            return to_roster_entry(r) if r else None

    def update_status(self, *, record_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_records SET status=%s WHERE record_id=%s",
                (status.value, int(record_id)),
            )
            return cur.rowcount > 0

    def present_session_starts(self, *, user_id: int, since: datetime) -> Sequence[datetime]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.start_time
                FROM attendance_records a
                JOIN training_sessions s ON s.session_id = a.training_session_id
                WHERE a.user_id=%s AND a.status=%s
                  AND s.deleted_at IS NULL AND s.start_time >= %s
                ORDER BY s.start_time
                """,
                (int(user_id), AttendanceStatus.PRESENT.value, since),
            )
            return [r["start_time"] for r in fetchall(cur)]

    def sessions_for_user(self, user_id: int) -> Sequence[TrainingSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.session_id, s.trainer_id, s.start_time, s.end_time, s.max_participants, s.notes, s.category_id
                FROM attendance_records a
                JOIN training_sessions s ON s.session_id = a.training_session_id
                WHERE a.user_id=%s AND s.deleted_at IS NULL
                ORDER BY s.start_time
                """,
                (int(user_id),),
            )
            return [
                TrainingSession(
                    session_id=int(r["session_id"]),
                    trainer_id=int(r["trainer_id"]),
                    start_time=r["start_time"],
                    end_time=r["end_time"],
                    max_participants=int(r["max_participants"]),
                    notes=r.get("notes"),
                    category_id=r.get("category_id"),
                )
                for r in fetchall(cur)
            ]
