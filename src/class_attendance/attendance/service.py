from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import as_calendar_date, now_local
from ..common.validators import require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .validator import AttendanceValidator

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: a recorder student submits one attendance record."""

    def __init__(self, attendance: AttendanceRepository, validator: AttendanceValidator):
        self._attendance = attendance
        self._validator = validator

    def record(
        self,
        *,
        student_id: int,
        class_id: int,
        status: AttendanceStatus,
        attendance_date: date | datetime | str,
        recorded_by: int,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Validate, then append exactly one record.

        Several records for the same student and day are accepted.
        """
        attendance_date = as_calendar_date(attendance_date)
        status = require_status(status)
        notes = notes or None

        try:
            self._validator.validate(student_id=student_id, class_id=class_id, recorded_by=recorded_by)
        except DomainError as e:
            logger.warning(
                "Rejected attendance for student %s in class %s by %s: %s",
                student_id, class_id, recorded_by, e,
            )
            raise

        created_at = now or now_local()
        attendance_id = self._attendance.create(
            student_id=int(student_id),
            class_id=int(class_id),
            status=status,
            attendance_date=attendance_date,
            recorded_by=int(recorded_by),
            notes=notes,
            created_at=created_at,
        )
        logger.info(
            "Recorded attendance %s: student %s class %s %s on %s",
            attendance_id, student_id, class_id, status.value, attendance_date.isoformat(),
        )
        return AttendanceRecord(
            attendance_id=attendance_id,
            student_id=int(student_id),
            class_id=int(class_id),
            status=status,
            attendance_date=attendance_date,
            recorded_by=int(recorded_by),
            notes=notes,
            created_at=created_at,
        )
