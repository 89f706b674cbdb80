from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SchoolClass
from .repository import ClassRepository

_UPDATABLE = ("name", "grade", "academic_year")


def _to_class(r: dict) -> SchoolClass:
    return SchoolClass(
        class_id=int(r["class_id"]),
        name=r["name"],
        grade=r["grade"],
        academic_year=r["academic_year"],
        created_at=r["created_at"],
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, grade, academic_year, created_at
                FROM classes
                WHERE class_id=%s
                """,
                (class_id,),
            )
            row = fetchone(cur)
            return _to_class(row) if row else None

    def list_all(self) -> Sequence[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, grade, academic_year, created_at
                FROM classes
                ORDER BY class_id
                """
            )
            return [_to_class(r) for r in fetchall(cur)]

    def create(self, *, name: str, grade: str, academic_year: str, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO classes(name, grade, academic_year, created_at)
                VALUES(%s,%s,%s,%s)
                """,
                (name, grade, academic_year, created_at),
            )
            return int(cur.lastrowid)

    def update(self, class_id: int, changes: dict) -> bool:
        columns = [c for c in _UPDATABLE if c in changes]
        if not columns:
            return self.get_by_id(class_id) is not None

        assignments = ", ".join(f"{c}=%s" for c in columns)
        params = [changes[c] for c in columns] + [class_id]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE classes SET {assignments} WHERE class_id=%s", tuple(params))
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when values are unchanged.
            cur.execute("SELECT 1 AS found FROM classes WHERE class_id=%s", (class_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, class_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes WHERE class_id=%s", (class_id,))
            return cur.rowcount > 0
