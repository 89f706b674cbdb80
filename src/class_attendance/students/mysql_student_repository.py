from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_COLUMNS = "student_id, name, student_code, class_id, is_attendance_recorder, created_at"
_UPDATABLE = ("name", "student_code", "class_id", "is_attendance_recorder")


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        student_code=r["student_code"],
        class_id=int(r["class_id"]),
        is_attendance_recorder=bool(r["is_attendance_recorder"]),
        created_at=r["created_at"],
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_code(self, student_code: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_code=%s", (student_code,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def list_by_class(self, class_id: int, *, recorders_only: bool = False) -> Sequence[Student]:
        sql = f"SELECT {_COLUMNS} FROM students WHERE class_id=%s"
        if recorders_only:
            sql += " AND is_attendance_recorder=1"
        sql += " ORDER BY student_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, (class_id,))
            return [_to_student(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        student_code: str,
        class_id: int,
        is_attendance_recorder: bool,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(name, student_code, class_id, is_attendance_recorder, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, student_code, class_id, 1 if is_attendance_recorder else 0, created_at),
            )
            return int(cur.lastrowid)

    def update(self, student_id: int, changes: dict) -> bool:
        columns = [c for c in _UPDATABLE if c in changes]
        if not columns:
            return self.get_by_id(student_id) is not None

        params: list[object] = []
        for c in columns:
            value = changes[c]
            params.append((1 if value else 0) if c == "is_attendance_recorder" else value)
        params.append(student_id)
        assignments = ", ".join(f"{c}=%s" for c in columns)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE students SET {assignments} WHERE student_id=%s", tuple(params))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM students WHERE student_id=%s", (student_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (student_id,))
            return cur.rowcount > 0

    def delete_by_class(self, class_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE class_id=%s", (class_id,))
            return int(cur.rowcount)
