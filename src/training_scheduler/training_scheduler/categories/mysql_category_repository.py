from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TrainingCategory
from .repository import CategoryRepository


def _to_category(r: dict) -> TrainingCategory:
    return TrainingCategory(
        category_id=int(r["category_id"]),
        name=r["name"],
        description=r.get("description"),
        color=r.get("color"),
    )


class MySQLCategoryRepository(CategoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, category_id: int) -> Optional[TrainingCategory]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT category_id, name, description, color FROM training_categories WHERE category_id=%s",
                (int(category_id),),
            )
            r = fetchone(cur)
            return _to_category(r) if r else None

    def list_all(self) -> Sequence[TrainingCategory]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT category_id, name, description, color FROM training_categories ORDER BY name")
            return [_to_category(r) for r in fetchall(cur)]

    def create(self, *, name: str, description: Optional[str], color: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO training_categories(name, description, color) VALUES(%s,%s,%s)",
                (name, description, color),
            )
            return int(cur.lastrowid)

    def update(self, *, category_id: int, name: str, description: Optional[str], color: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE training_categories
                SET name=%s, description=%s, color=%s
                WHERE category_id=%s
                """,
                (name, description, color, int(category_id)),
            )

    def delete(self, category_id: int) -> bool:
        # fk_sessions_category is ON DELETE SET NULL
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM training_categories WHERE category_id=%s", (int(category_id),))
            return cur.rowcount > 0
