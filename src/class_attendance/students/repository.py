from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_code(self, student_code: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_class(self, class_id: int, *, recorders_only: bool = False) -> Sequence[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        student_code: str,
        class_id: int,
        is_attendance_recorder: bool,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def update(self, student_id: int, changes: dict) -> bool:
        """Apply only the given column changes. Returns False if the student is missing."""

        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError

    def delete_by_class(self, class_id: int) -> int:
        """Returns number of deleted rows (0 is fine)."""

        raise NotImplementedError
