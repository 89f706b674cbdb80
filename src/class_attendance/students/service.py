from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import EntityKind
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage students and their recorder flag (teacher)."""

    def __init__(self, students: StudentRepository, classes: ClassRepository, attendance: AttendanceRepository):
        self._students = students
        self._classes = classes
        self._attendance = attendance

    def _require_class(self, class_id: int) -> None:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError(EntityKind.CLASS, class_id)

    def _require_unique_code(self, student_code: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self._students.get_by_code(student_code)
        if existing and existing.student_id != exclude_id:
            raise ValidationError(f"Student code {student_code!r} already exists")

    def create(
        self,
        *,
        name: str,
        student_code: str,
        class_id: int,
        is_attendance_recorder: bool = False,
        now: Optional[datetime] = None,
    ) -> Student:
        name = require_non_empty(name, "Student name")
        student_code = require_non_empty(student_code, "Student code")
        self._require_class(class_id)
        self._require_unique_code(student_code)
        created_at = now or now_local()

        student_id = self._students.create(
            name=name,
            student_code=student_code,
            class_id=int(class_id),
            is_attendance_recorder=bool(is_attendance_recorder),
            created_at=created_at,
        )
        logger.info("Created student %s (%s) in class %s", student_id, student_code, class_id)
        return Student(
            student_id=student_id,
            name=name,
            student_code=student_code,
            class_id=int(class_id),
            is_attendance_recorder=bool(is_attendance_recorder),
            created_at=created_at,
        )

    def get(self, student_id: int) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError(EntityKind.STUDENT, student_id)
        return student

    def list_by_class(self, class_id: int) -> Sequence[Student]:
        return self._students.list_by_class(class_id)

    def list_recorders(self, class_id: int) -> Sequence[Student]:
        return self._students.list_by_class(class_id, recorders_only=True)

    def update(
        self,
        student_id: int,
        *,
        name: Optional[str] = None,
        student_code: Optional[str] = None,
        class_id: Optional[int] = None,
        is_attendance_recorder: Optional[bool] = None,
    ) -> Student:
        """Partial update. Moving a student does not touch existing attendance records."""
        current = self.get(student_id)

        changes: dict = {}
        if name is not None:
            changes["name"] = require_non_empty(name, "Student name")
        if student_code is not None:
            student_code = require_non_empty(student_code, "Student code")
            if student_code != current.student_code:
                self._require_unique_code(student_code, exclude_id=current.student_id)
            changes["student_code"] = student_code
        if class_id is not None:
            if int(class_id) != current.class_id:
                self._require_class(class_id)
            changes["class_id"] = int(class_id)
        if is_attendance_recorder is not None:
            changes["is_attendance_recorder"] = bool(is_attendance_recorder)

        if not changes:
            return current

        if not self._students.update(student_id, changes):
            raise NotFoundError(EntityKind.STUDENT, student_id)
        logger.info("Updated student %s: %s", student_id, sorted(changes))
        return self.get(student_id)

    def delete(self, student_id: int) -> None:
        """Delete a student with every record they are the subject or the recorder of."""
        steps: list[tuple[str, Callable[[int], int]]] = [
            ("subject records", self._attendance.delete_by_student),
            ("recorded records", self._attendance.delete_by_recorder),
        ]
        for label, step in steps:
            removed = step(student_id)
            logger.debug("Student %s cascade: removed %s %s", student_id, removed, label)

        if not self._students.delete_by_id(student_id):
            raise NotFoundError(EntityKind.STUDENT, student_id)
        logger.info("Deleted student %s", student_id)
