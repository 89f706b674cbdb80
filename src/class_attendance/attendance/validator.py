from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..classes.repository import ClassRepository
from ..core.enums import EntityKind
from ..core.exceptions import DomainError, MismatchedClassError, NotFoundError, UnauthorizedRecorderError
from ..students.model import Student
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class AttendanceRequest:
    """The entity references an attendance submission must satisfy."""

    student_id: int
    class_id: int
    recorded_by: int


class _Lookups:
    """Point reads shared by the checks of a single validation run."""

    def __init__(self, request: AttendanceRequest, classes: ClassRepository, students: StudentRepository):
        self.request = request
        self._classes = classes
        self._students = students
        self._cache: dict[str, Optional[Student]] = {}

    def class_exists(self) -> bool:
        return self._classes.get_by_id(self.request.class_id) is not None

    def subject(self) -> Optional[Student]:
        if "subject" not in self._cache:
            self._cache["subject"] = self._students.get_by_id(self.request.student_id)
        return self._cache["subject"]

    def recorder(self) -> Optional[Student]:
        if "recorder" not in self._cache:
            self._cache["recorder"] = self._students.get_by_id(self.request.recorded_by)
        return self._cache["recorder"]


Check = Callable[[_Lookups], Optional[DomainError]]


def _class_exists(ctx: _Lookups) -> Optional[DomainError]:
    if not ctx.class_exists():
        return NotFoundError(EntityKind.CLASS, ctx.request.class_id)
    return None


def _student_exists(ctx: _Lookups) -> Optional[DomainError]:
    if ctx.subject() is None:
        return NotFoundError(EntityKind.STUDENT, ctx.request.student_id)
    return None


def _student_in_class(ctx: _Lookups) -> Optional[DomainError]:
    subject = ctx.subject()
    if subject is not None and subject.class_id != ctx.request.class_id:
        return MismatchedClassError(ctx.request.student_id, ctx.request.class_id)
    return None


def _recorder_exists(ctx: _Lookups) -> Optional[DomainError]:
    if ctx.recorder() is None:
        return NotFoundError(EntityKind.RECORDER, ctx.request.recorded_by)
    return None


def _recorder_authorized(ctx: _Lookups) -> Optional[DomainError]:
    recorder = ctx.recorder()
    if recorder is not None and not recorder.is_attendance_recorder:
        return UnauthorizedRecorderError(ctx.request.recorded_by)
    return None


# Order is part of the contract: the first failing check decides the error.
CHECKS: tuple[Check, ...] = (
    _class_exists,
    _student_exists,
    _student_in_class,
    _recorder_exists,
    _recorder_authorized,
)


class AttendanceValidator:
    """Decides whether an attendance submission may be written. Never writes."""

    def __init__(self, classes: ClassRepository, students: StudentRepository, *, checks: tuple[Check, ...] = CHECKS):
        self._classes = classes
        self._students = students
        self._checks = checks

    def first_violation(self, *, student_id: int, class_id: int, recorded_by: int) -> Optional[DomainError]:
        request = AttendanceRequest(student_id=int(student_id), class_id=int(class_id), recorded_by=int(recorded_by))
        ctx = _Lookups(request, self._classes, self._students)
        for check in self._checks:
            error = check(ctx)
            if error is not None:
                return error
        return None

    def validate(self, *, student_id: int, class_id: int, recorded_by: int) -> None:
        error = self.first_violation(student_id=student_id, class_id=class_id, recorded_by=recorded_by)
        if error is not None:
            raise error
