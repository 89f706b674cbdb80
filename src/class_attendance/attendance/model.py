from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one (student, day, status) observation.

    class_id is a snapshot of the class the record was taken under; reports
    window on it rather than on the student's current class.
    """

    attendance_id: int
    student_id: int
    class_id: int
    status: AttendanceStatus
    attendance_date: date
    recorded_by: int
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: per-student totals over a reporting window (never stored)."""

    student_id: int
    student_name: str
    total_days: int
    present: int
    sick: int
    excused_leave: int
    absent: int
    dispensation: int
    attendance_percentage: int
