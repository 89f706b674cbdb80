from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Closed set of statuses an attendance record can carry."""

    PRESENT = "Present"
    SICK = "Sick"
    EXCUSED_LEAVE = "ExcusedLeave"
    ABSENT = "Absent"
    DISPENSATION = "Dispensation"


class EntityKind(str, Enum):
    """Which entity a lookup failed on."""

    CLASS = "Class"
    STUDENT = "Student"
    RECORDER = "Recorder"
