from __future__ import annotations

from datetime import date, datetime

import pytest

from class_attendance.core.enums import AttendanceStatus
from class_attendance.core.exceptions import MismatchedClassError, UnauthorizedRecorderError


def test_record_echoes_input(container, school, fixed_now):
    rec = container.attendance_service.record(
        student_id=school["siti"].student_id,
        class_id=school["class_a"].class_id,
        status=AttendanceStatus.SICK,
        attendance_date=date(2024, 3, 15),
        recorded_by=school["recorder"].student_id,
        notes="Flu",
        now=fixed_now,
    )

    assert rec.attendance_id > 0
    assert rec.student_id == school["siti"].student_id
    assert rec.class_id == school["class_a"].class_id
    assert rec.status == AttendanceStatus.SICK
    assert rec.attendance_date == date(2024, 3, 15)
    assert rec.recorded_by == school["recorder"].student_id
    assert rec.notes == "Flu"
    assert rec.created_at == fixed_now
    assert container.attendance_repo.rows == [rec]


@pytest.mark.parametrize("notes", [None, ""])
def test_missing_or_empty_notes_stored_as_none(record, school, notes):
    rec = record(school["siti"], AttendanceStatus.PRESENT, date(2024, 3, 15), notes=notes)
    assert rec.notes is None


def test_datetime_and_iso_string_dates_are_normalized(container, school):
    svc = container.attendance_service
    common = dict(
        student_id=school["siti"].student_id,
        class_id=school["class_a"].class_id,
        status="Present",
        recorded_by=school["recorder"].student_id,
    )

    from_dt = svc.record(attendance_date=datetime(2024, 3, 15, 23, 59), **common)
    from_str = svc.record(attendance_date="2024-03-15", **common)

    assert from_dt.attendance_date == date(2024, 3, 15)
    assert from_str.attendance_date == date(2024, 3, 15)
    assert from_str.status == AttendanceStatus.PRESENT


def test_duplicates_for_same_student_and_day_are_kept(container, record, school):
    record(school["siti"], AttendanceStatus.PRESENT, date(2024, 3, 15))
    record(school["siti"], AttendanceStatus.ABSENT, date(2024, 3, 15))

    assert len(container.attendance_repo.rows) == 2


def test_failed_validation_writes_nothing(container, school):
    with pytest.raises(MismatchedClassError):
        container.attendance_service.record(
            student_id=school["other"].student_id,
            class_id=school["class_a"].class_id,
            status=AttendanceStatus.PRESENT,
            attendance_date=date(2024, 3, 15),
            recorded_by=school["recorder"].student_id,
        )

    with pytest.raises(UnauthorizedRecorderError):
        container.attendance_service.record(
            student_id=school["siti"].student_id,
            class_id=school["class_a"].class_id,
            status=AttendanceStatus.PRESENT,
            attendance_date=date(2024, 3, 15),
            recorded_by=school["andi"].student_id,
        )

    assert container.attendance_repo.rows == []
