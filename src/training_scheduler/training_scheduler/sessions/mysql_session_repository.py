from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from ..attendance.model import AttendanceRecord, AttendanceWithUser
from ..categories.model import TrainingCategory
from ..core.enums import AttendanceStatus, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..users.model import User
from .model import SessionView, TrainingSession
from .repository import TrainingSessionRepository

_SESSION_SELECT = """
    SELECT s.session_id, s.trainer_id, s.start_time, s.end_time, s.max_participants, s.notes, s.category_id,
           c.name AS category_name, c.description AS category_description, c.color AS category_color
    FROM training_sessions s
    LEFT JOIN training_categories c ON c.category_id = s.category_id
    WHERE s.deleted_at IS NULL
"""

_ROSTER_SELECT = """
    SELECT a.record_id, a.training_session_id, a.user_id, a.status, a.updated_at,
           u.name, u.email, u.password_hash, u.role
    FROM attendance_records a
    JOIN users u ON u.user_id = a.user_id
"""


def _to_session(r: dict) -> TrainingSession:
    return TrainingSession(
        session_id=int(r["session_id"]),
        trainer_id=int(r["trainer_id"]),
        start_time=r["start_time"],
        end_time=r["end_time"],
        max_participants=int(r["max_participants"]),
        notes=r.get("notes"),
        category_id=int(r["category_id"]) if r.get("category_id") is not None else None,
    )


def _to_category(r: dict) -> Optional[TrainingCategory]:
    if r.get("category_id") is None:
        return None
    return TrainingCategory(
        category_id=int(r["category_id"]),
        name=r["category_name"],
        description=r.get("category_description"),
        color=r.get("category_color"),
    )


def to_roster_entry(r: dict) -> AttendanceWithUser:
    return AttendanceWithUser(
        record=AttendanceRecord(
            record_id=int(r["record_id"]),
            training_session_id=int(r["training_session_id"]),
            user_id=int(r["user_id"]),
            status=AttendanceStatus(r["status"]),
            updated_at=r.get("updated_at"),
        ),
        user=User(
            user_id=int(r["user_id"]),
            name=r["name"],
            email=r["email"],
            password_hash=r["password_hash"],
            role=Role(r["role"]),
        ),
    )


class MySQLTrainingSessionRepository(TrainingSessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, session_id: int) -> Optional[TrainingSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SESSION_SELECT + " AND s.session_id=%s", (int(session_id),))
            r = fetchone(cur)
            return _to_session(r) if r else None

    def get_view(self, session_id: int) -> Optional[SessionView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SESSION_SELECT + " AND s.session_id=%s", (int(session_id),))
            r = fetchone(cur)
            if not r:
                return None

            cur.execute(
                _ROSTER_SELECT + " WHERE a.training_session_id=%s ORDER BY a.record_id",
                (int(session_id),),
            )
            roster = tuple(to_roster_entry(x) for x in fetchall(cur))
            return SessionView(session=_to_session(r), roster=roster, category=_to_category(r))

    def list_views(self) -> Sequence[SessionView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SESSION_SELECT + " ORDER BY s.start_time ASC, s.session_id ASC")
            rows = fetchall(cur)
            if not rows:
                return []

            ids = [int(r["session_id"]) for r in rows]
            placeholders = ",".join(["%s"] * len(ids))
            cur.execute(
                _ROSTER_SELECT + f" WHERE a.training_session_id IN ({placeholders}) ORDER BY a.record_id",
                tuple(ids),
            )
            rosters: Dict[int, List[AttendanceWithUser]] = defaultdict(list)
            for x in fetchall(cur):
                rosters[int(x["training_session_id"])].append(to_roster_entry(x))

            return [
                SessionView(
                    session=_to_session(r),
                    roster=tuple(rosters.get(int(r["session_id"]), ())),
                    category=_to_category(r),
                )
                for r in rows
            ]

    def create(
        self,
        *,
        trainer_id: int,
        start_time: datetime,
        end_time: datetime,
        max_participants: int,
        notes: Optional[str],
        category_id: Optional[int],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO training_sessions(trainer_id, start_time, end_time, max_participants, notes, category_id)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(trainer_id), start_time, end_time, int(max_participants), notes, category_id),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        session_id: int,
        start_time: datetime,
        end_time: datetime,
        max_participants: int,
        notes: Optional[str],
        category_id: Optional[int],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE training_sessions
                SET start_time=%s, end_time=%s, max_participants=%s, notes=%s, category_id=%s
                WHERE session_id=%s AND deleted_at IS NULL
                """,
                (start_time, end_time, int(max_participants), notes, category_id, int(session_id)),
            )

    def soft_delete(self, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE training_sessions SET deleted_at=NOW() WHERE session_id=%s AND deleted_at IS NULL",
                (int(session_id),),
            )
            return cur.rowcount > 0
