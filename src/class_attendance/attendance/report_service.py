from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Sequence

from ..common.datetime_utils import month_window, week_window
from ..core.enums import AttendanceStatus
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository


def attendance_percentage(present: int, total_days: int) -> int:
    """round(present / total_days * 100), halves rounded up; 0 when there are no days."""
    if total_days <= 0:
        return 0
    return (present * 200 + total_days) // (2 * total_days)


class AttendanceReportService:
    """Daily, weekly and monthly views for the teacher dashboard.

    Windows are keyed on the class snapshot stored on each record.
    """

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def daily(self, class_id: int, day: date) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_class_between(class_id=int(class_id), start_date=day, end_date=day)

    def weekly(self, class_id: int, week_start: date) -> Sequence[AttendanceRecord]:
        start, end = week_window(week_start)
        return self._attendance.list_for_class_between(class_id=int(class_id), start_date=start, end_date=end)

    def monthly(self, class_id: int, month: int, year: int) -> list[AttendanceSummary]:
        start, end = month_window(year, month)
        students = self._students.list_by_class(int(class_id))
        records = self._attendance.list_for_class_between(class_id=int(class_id), start_date=start, end_date=end)

        counts: dict[int, Counter] = {s.student_id: Counter() for s in students}
        for r in records:
            # Students who have since left the class are not listed.
            if r.student_id in counts:
                counts[r.student_id][r.status] += 1

        summary = []
        for s in students:
            c = counts[s.student_id]
            total_days = sum(c.values())
            present = c[AttendanceStatus.PRESENT]
            summary.append(
                AttendanceSummary(
                    student_id=s.student_id,
                    student_name=s.name,
                    total_days=total_days,
                    present=present,
                    sick=c[AttendanceStatus.SICK],
                    excused_leave=c[AttendanceStatus.EXCUSED_LEAVE],
                    absent=c[AttendanceStatus.ABSENT],
                    dispensation=c[AttendanceStatus.DISPENSATION],
                    attendance_percentage=attendance_percentage(present, total_days),
                )
            )

        summary.sort(key=lambda x: x.student_name)
        return summary
