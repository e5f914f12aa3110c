from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, transaction
from .model import User
from .repository import AdminGuardOutcome, UserRepository

_USER_COLUMNS = "user_id, name, email, password_hash, role"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(name, email, password_hash, role)
                VALUES(%s,%s,%s,%s)
                """,
                (name, email, password_hash, role.value),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users ORDER BY user_id DESC")
            return [_to_user(r) for r in fetchall(cur)]

    def _lock_user_and_admins(self, cur, user_id: int) -> tuple[Optional[dict], int]:
        # Lock every admin row so two concurrent removals serialize on the same rows.
        cur.execute("SELECT user_id FROM users WHERE role='admin' FOR UPDATE")
        admin_count = len(fetchall(cur))
        cur.execute("SELECT user_id, role FROM users WHERE user_id=%s FOR UPDATE", (int(user_id),))
        return fetchone(cur), admin_count

    def delete_guarded(self, user_id: int) -> AdminGuardOutcome:
        with transaction(self._conn_factory) as (_, cur):
            row, admin_count = self._lock_user_and_admins(cur, user_id)
            if not row:
                return AdminGuardOutcome.NOT_FOUND
            if row["role"] == Role.ADMIN.value and admin_count <= 1:
                return AdminGuardOutcome.LAST_ADMIN

            cur.execute("DELETE FROM users WHERE user_id=%s", (int(user_id),))
            return AdminGuardOutcome.APPLIED

    def change_role_guarded(self, user_id: int, role: Role) -> AdminGuardOutcome:
        with transaction(self._conn_factory) as (_, cur):
            row, admin_count = self._lock_user_and_admins(cur, user_id)
            if not row:
                return AdminGuardOutcome.NOT_FOUND
            if row["role"] == Role.ADMIN.value and role != Role.ADMIN and admin_count <= 1:
                return AdminGuardOutcome.LAST_ADMIN

            cur.execute("UPDATE users SET role=%s WHERE user_id=%s", (role.value, int(user_id)))
            return AdminGuardOutcome.APPLIED
