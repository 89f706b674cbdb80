from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Student:
    """Domain entity: a student belonging to exactly one class.

    student_code is the external identifier printed on school documents and is
    unique system-wide; student_id is the internal identity.
    """

    student_id: int
    name: str
    student_code: str
    class_id: int
    is_attendance_recorder: bool
    created_at: datetime
