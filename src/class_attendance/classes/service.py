from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import EntityKind
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .model import SchoolClass
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: manage classes (teacher)."""

    def __init__(self, classes: ClassRepository, students: StudentRepository, attendance: AttendanceRepository):
        self._classes = classes
        self._students = students
        self._attendance = attendance

    def create(self, *, name: str, grade: str, academic_year: str, now: Optional[datetime] = None) -> SchoolClass:
        name = require_non_empty(name, "Class name")
        grade = require_non_empty(grade, "Grade")
        academic_year = require_non_empty(academic_year, "Academic year")
        created_at = now or now_local()

        class_id = self._classes.create(name=name, grade=grade, academic_year=academic_year, created_at=created_at)
        logger.info("Created class %s (%s)", class_id, name)
        return SchoolClass(
            class_id=class_id,
            name=name,
            grade=grade,
            academic_year=academic_year,
            created_at=created_at,
        )

    def list_all(self) -> Sequence[SchoolClass]:
        return self._classes.list_all()

    def get(self, class_id: int) -> SchoolClass:
        school_class = self._classes.get_by_id(class_id)
        if not school_class:
            raise NotFoundError(EntityKind.CLASS, class_id)
        return school_class

    def update(
        self,
        class_id: int,
        *,
        name: Optional[str] = None,
        grade: Optional[str] = None,
        academic_year: Optional[str] = None,
    ) -> SchoolClass:
        changes = {}
        if name is not None:
            changes["name"] = require_non_empty(name, "Class name")
        if grade is not None:
            changes["grade"] = require_non_empty(grade, "Grade")
        if academic_year is not None:
            changes["academic_year"] = require_non_empty(academic_year, "Academic year")

        if not changes:
            return self.get(class_id)

        if not self._classes.update(class_id, changes):
            raise NotFoundError(EntityKind.CLASS, class_id)
        logger.info("Updated class %s: %s", class_id, sorted(changes))
        return self.get(class_id)

    def delete(self, class_id: int) -> None:
        """Delete a class with its students and attendance records.

        Children go first so foreign keys hold at every step. Records that
        reference a member from elsewhere (kept under an earlier class, or
        entered by them as recorder for another class) go before the students.
        """
        members = self._students.list_by_class(class_id)
        for student in members:
            self._attendance.delete_by_student(student.student_id)
            self._attendance.delete_by_recorder(student.student_id)

        steps: list[tuple[str, Callable[[int], int]]] = [
            ("attendance", self._attendance.delete_by_class),
            ("students", self._students.delete_by_class),
        ]
        for label, step in steps:
            removed = step(class_id)
            logger.debug("Class %s cascade: removed %s %s row(s)", class_id, removed, label)

        if not self._classes.delete_by_id(class_id):
            raise NotFoundError(EntityKind.CLASS, class_id)
        logger.info("Deleted class %s (%s student(s))", class_id, len(members))
