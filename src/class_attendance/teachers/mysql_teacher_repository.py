from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Teacher
from .repository import TeacherRepository


def _to_teacher(r: dict) -> Teacher:
    return Teacher(
        teacher_id=int(r["teacher_id"]),
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        created_at=r["created_at"],
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, name, email, password_hash, created_at
                FROM teachers
                WHERE email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            return _to_teacher(row) if row else None

    def create(self, *, name: str, email: str, password_hash: str, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO teachers(name, email, password_hash, created_at)
                VALUES(%s,%s,%s,%s)
                """,
                (name, email, password_hash, created_at),
            )
            return int(cur.lastrowid)
