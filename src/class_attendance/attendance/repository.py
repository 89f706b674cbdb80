from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
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
        raise NotImplementedError

    def list_for_class_between(self, *, class_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records whose class snapshot matches, with start_date <= date <= end_date."""

        raise NotImplementedError

    # Cascade helpers: return number of deleted rows (0 is fine).
    def delete_by_class(self, class_id: int) -> int:
        raise NotImplementedError

    def delete_by_student(self, student_id: int) -> int:
        raise NotImplementedError

    def delete_by_recorder(self, recorder_id: int) -> int:
        raise NotImplementedError
