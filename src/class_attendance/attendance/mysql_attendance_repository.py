from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        student_id: int,
        class_id: int,
        status: AttendanceStatus,
        attendance_date: date,
        recorded_by: int,
        notes: Optional[str],
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, class_id, status, attendance_date, recorded_by, notes, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (student_id, class_id, status.value, attendance_date, recorded_by, notes, created_at),
            )
            return int(cur.lastrowid)

    def list_for_class_between(self, *, class_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, class_id, status, attendance_date, recorded_by, notes, created_at
                FROM attendance_records
                WHERE class_id=%s AND attendance_date BETWEEN %s AND %s
                ORDER BY attendance_id
                """,
                (class_id, start_date, end_date),
            )
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    student_id=int(r["student_id"]),
                    class_id=int(r["class_id"]),
                    status=AttendanceStatus(r["status"]),
                    attendance_date=r["attendance_date"],
                    recorded_by=int(r["recorded_by"]),
                    notes=r.get("notes"),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]

    def _delete_where(self, column: str, value: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM attendance_records WHERE {column}=%s", (value,))
            return int(cur.rowcount)

    def delete_by_class(self, class_id: int) -> int:
        return self._delete_where("class_id", class_id)

    def delete_by_student(self, student_id: int) -> int:
        return self._delete_where("student_id", student_id)

    def delete_by_recorder(self, recorder_id: int) -> int:
        return self._delete_where("recorded_by", recorder_id)
