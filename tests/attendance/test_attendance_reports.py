from __future__ import annotations

from datetime import date

import pytest

from class_attendance.attendance.report_service import attendance_percentage
from class_attendance.core.enums import AttendanceStatus
from class_attendance.core.exceptions import InvalidRangeError

P = AttendanceStatus.PRESENT


def test_daily_returns_only_that_day_and_class(container, record, school):
    record(school["siti"], P, date(2024, 3, 14))
    on_day = record(school["siti"], P, date(2024, 3, 15))
    other_student = record(school["andi"], AttendanceStatus.SICK, date(2024, 3, 15))
    record(school["siti"], P, date(2024, 3, 16))

    rows = container.report_service.daily(school["class_a"].class_id, date(2024, 3, 15))

    assert [r.attendance_id for r in rows] == [on_day.attendance_id, other_student.attendance_id]
    assert container.report_service.daily(school["class_b"].class_id, date(2024, 3, 15)) == []


def test_weekly_window_is_inclusive_on_both_ends(container, record, school):
    before = record(school["siti"], P, date(2023, 12, 31))
    first = record(school["siti"], P, date(2024, 1, 1))
    last = record(school["siti"], P, date(2024, 1, 7))
    after = record(school["siti"], P, date(2024, 1, 8))

    rows = container.report_service.weekly(school["class_a"].class_id, date(2024, 1, 1))
    ids = {r.attendance_id for r in rows}

    assert ids == {first.attendance_id, last.attendance_id}
    assert before.attendance_id not in ids
    assert after.attendance_id not in ids


def test_weekly_start_is_not_moved_to_monday(container, record, school):
    # 2024-01-03 is a Wednesday; window is 01-03..01-09.
    record(school["siti"], P, date(2024, 1, 1))
    inside = record(school["siti"], P, date(2024, 1, 9))

    rows = container.report_service.weekly(school["class_a"].class_id, date(2024, 1, 3))

    assert [r.attendance_id for r in rows] == [inside.attendance_id]


def test_monthly_counts_and_percentage(container, record, school):
    record(school["siti"], P, date(2024, 3, 4))
    record(school["siti"], P, date(2024, 3, 5))
    record(school["siti"], AttendanceStatus.SICK, date(2024, 3, 6))

    summary = container.report_service.monthly(school["class_a"].class_id, 3, 2024)
    siti = next(s for s in summary if s.student_id == school["siti"].student_id)

    assert siti.total_days == 3
    assert siti.present == 2
    assert siti.sick == 1
    assert siti.excused_leave == siti.absent == siti.dispensation == 0
    assert siti.attendance_percentage == 67


def test_monthly_includes_students_without_records(container, school):
    summary = container.report_service.monthly(school["class_a"].class_id, 3, 2024)

    assert [s.student_name for s in summary] == ["Andi", "Budi", "Siti"]
    for s in summary:
        assert s.total_days == 0
        assert s.attendance_percentage == 0


def test_monthly_boundaries_respect_leap_february(container, record, school):
    record(school["siti"], P, date(2024, 2, 29))
    record(school["siti"], P, date(2024, 3, 1))
    record(school["siti"], AttendanceStatus.ABSENT, date(2024, 3, 31))
    record(school["siti"], P, date(2024, 4, 1))

    summary = container.report_service.monthly(school["class_a"].class_id, 3, 2024)
    siti = next(s for s in summary if s.student_id == school["siti"].student_id)

    assert siti.total_days == 2
    assert siti.present == 1
    assert siti.absent == 1
    assert siti.attendance_percentage == 50

    feb = container.report_service.monthly(school["class_a"].class_id, 2, 2024)
    assert next(s for s in feb if s.student_id == school["siti"].student_id).total_days == 1


def test_monthly_counts_every_status(container, record, school):
    for day, status in enumerate(AttendanceStatus, start=1):
        record(school["andi"], status, date(2024, 5, day))

    andi = next(
        s for s in container.report_service.monthly(school["class_a"].class_id, 5, 2024)
        if s.student_id == school["andi"].student_id
    )

    assert (andi.present, andi.sick, andi.excused_leave, andi.absent, andi.dispensation) == (1, 1, 1, 1, 1)
    assert andi.total_days == 5
    assert andi.attendance_percentage == 20


def test_records_stay_under_the_class_they_were_taken_in(container, record, school):
    record(school["siti"], P, date(2024, 3, 4))
    container.student_service.update(school["siti"].student_id, class_id=school["class_b"].class_id)

    daily_a = container.report_service.daily(school["class_a"].class_id, date(2024, 3, 4))
    daily_b = container.report_service.daily(school["class_b"].class_id, date(2024, 3, 4))

    assert len(daily_a) == 1
    assert daily_b == []

    # Monthly lists current members only; Siti now shows under class B with no days.
    monthly_b = container.report_service.monthly(school["class_b"].class_id, 3, 2024)
    siti = next(s for s in monthly_b if s.student_id == school["siti"].student_id)
    assert siti.total_days == 0


def test_monthly_for_unknown_class_is_empty(container):
    assert container.report_service.monthly(12345, 3, 2024) == []


@pytest.mark.parametrize("month, year", [(0, 2024), (13, 2024), (3, 0), (3, 10000)])
def test_monthly_rejects_invalid_range(container, month, year):
    with pytest.raises(InvalidRangeError):
        container.report_service.monthly(1, month, year)


@pytest.mark.parametrize(
    "present, total, expected",
    [(0, 0, 0), (2, 3, 67), (1, 3, 33), (1, 8, 13), (3, 8, 38), (1, 2, 50), (5, 5, 100)],
)
def test_percentage_rounds_half_up(present, total, expected):
    assert attendance_percentage(present, total) == expected
