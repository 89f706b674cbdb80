from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from class_attendance.attendance.model import AttendanceRecord
from class_attendance.classes.model import SchoolClass
from class_attendance.container import wire
from class_attendance.core.enums import AttendanceStatus
from class_attendance.core.exceptions import StoreError
from class_attendance.students.model import Student
from class_attendance.teachers.model import Teacher


class InMemoryClasses:
    def __init__(self):
        self._rows: dict[int, SchoolClass] = {}
        self._id = 0

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        return self._rows.get(class_id)

    def list_all(self):
        return list(self._rows.values())

    def create(self, *, name, grade, academic_year, created_at) -> int:
        self._id += 1
        self._rows[self._id] = SchoolClass(
            class_id=self._id, name=name, grade=grade, academic_year=academic_year, created_at=created_at
        )
        return self._id

    def update(self, class_id: int, changes: dict) -> bool:
        if class_id not in self._rows:
            return False
        self._rows[class_id] = replace(self._rows[class_id], **changes)
        return True

    def delete_by_id(self, class_id: int) -> bool:
        return self._rows.pop(class_id, None) is not None


class InMemoryStudents:
    """Rejects deleting a student that attendance rows still reference, like the FKs in schema.sql."""

    def __init__(self, attendance: Optional["InMemoryAttendance"] = None):
        self._rows: dict[int, Student] = {}
        self._id = 0
        self._attendance = attendance

    def _check_unreferenced(self, student_ids) -> None:
        if self._attendance is None:
            return
        ids = set(student_ids)
        if any(r.student_id in ids or r.recorded_by in ids for r in self._attendance.rows):
            raise StoreError("Cannot delete a student referenced by attendance records")

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._rows.get(student_id)

    def get_by_code(self, student_code: str) -> Optional[Student]:
        return next((s for s in self._rows.values() if s.student_code == student_code), None)

    def list_by_class(self, class_id: int, *, recorders_only: bool = False):
        return [
            s
            for s in self._rows.values()
            if s.class_id == class_id and (s.is_attendance_recorder or not recorders_only)
        ]

    def create(self, *, name, student_code, class_id, is_attendance_recorder, created_at) -> int:
        self._id += 1
        self._rows[self._id] = Student(
            student_id=self._id,
            name=name,
            student_code=student_code,
            class_id=class_id,
            is_attendance_recorder=is_attendance_recorder,
            created_at=created_at,
        )
        return self._id

    def update(self, student_id: int, changes: dict) -> bool:
        if student_id not in self._rows:
            return False
        self._rows[student_id] = replace(self._rows[student_id], **changes)
        return True

    def delete_by_id(self, student_id: int) -> bool:
        self._check_unreferenced([student_id])
        return self._rows.pop(student_id, None) is not None

    def delete_by_class(self, class_id: int) -> int:
        doomed = [k for k, s in self._rows.items() if s.class_id == class_id]
        self._check_unreferenced(doomed)
        for k in doomed:
            del self._rows[k]
        return len(doomed)


class InMemoryTeachers:
    def __init__(self):
        self._rows: dict[int, Teacher] = {}
        self._id = 0

    def get_by_email(self, email: str) -> Optional[Teacher]:
        return next((t for t in self._rows.values() if t.email == email), None)

    def create(self, *, name, email, password_hash, created_at) -> int:
        self._id += 1
        self._rows[self._id] = Teacher(
            teacher_id=self._id, name=name, email=email, password_hash=password_hash, created_at=created_at
        )
        return self._id


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[AttendanceRecord] = []
        self._id = 0

    def create(self, *, student_id, class_id, status, attendance_date, recorded_by, notes, created_at) -> int:
        self._id += 1
        self.rows.append(
            AttendanceRecord(
                attendance_id=self._id,
                student_id=student_id,
                class_id=class_id,
                status=status,
                attendance_date=attendance_date,
                recorded_by=recorded_by,
                notes=notes,
                created_at=created_at,
            )
        )
        return self._id

    def list_for_class_between(self, *, class_id: int, start_date: date, end_date: date):
        return [r for r in self.rows if r.class_id == class_id and start_date <= r.attendance_date <= end_date]

    def _delete(self, predicate) -> int:
        before = len(self.rows)
        self.rows = [r for r in self.rows if not predicate(r)]
        return before - len(self.rows)

    def delete_by_class(self, class_id: int) -> int:
        return self._delete(lambda r: r.class_id == class_id)

    def delete_by_student(self, student_id: int) -> int:
        return self._delete(lambda r: r.student_id == student_id)

    def delete_by_recorder(self, recorder_id: int) -> int:
        return self._delete(lambda r: r.recorded_by == recorder_id)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 7, 30, 0)


@pytest.fixture
def container():
    attendance = InMemoryAttendance()
    return wire(
        classes_repo=InMemoryClasses(),
        students_repo=InMemoryStudents(attendance),
        teachers_repo=InMemoryTeachers(),
        attendance_repo=attendance,
    )


@pytest.fixture
def school(container, fixed_now):
    """Two classes; class A has a recorder (Budi) and two regular students."""
    class_a = container.class_service.create(name="X-A", grade="10", academic_year="2023/2024", now=fixed_now)
    class_b = container.class_service.create(name="X-B", grade="10", academic_year="2023/2024", now=fixed_now)

    students = container.student_service
    recorder = students.create(
        name="Budi", student_code="S001", class_id=class_a.class_id, is_attendance_recorder=True, now=fixed_now
    )
    siti = students.create(name="Siti", student_code="S002", class_id=class_a.class_id, now=fixed_now)
    andi = students.create(name="Andi", student_code="S003", class_id=class_a.class_id, now=fixed_now)
    other = students.create(
        name="Rina", student_code="S004", class_id=class_b.class_id, is_attendance_recorder=True, now=fixed_now
    )

    return {
        "class_a": class_a,
        "class_b": class_b,
        "recorder": recorder,
        "siti": siti,
        "andi": andi,
        "other": other,
    }


@pytest.fixture
def record(container, school):
    """Record attendance in class A with Budi as recorder."""

    def _record(student, status: AttendanceStatus, on: date, notes=None):
        return container.attendance_service.record(
            student_id=student.student_id,
            class_id=school["class_a"].class_id,
            status=status,
            attendance_date=on,
            recorded_by=school["recorder"].student_id,
            notes=notes,
        )

    return _record
