from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.report_service import AttendanceReportService
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.validator import AttendanceValidator
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .database.connection import DBConfig, DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import AuthService, TeacherService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    classes_repo: ClassRepository
    students_repo: StudentRepository
    teachers_repo: TeacherRepository
    attendance_repo: AttendanceRepository

    class_service: ClassService
    student_service: StudentService
    teacher_service: TeacherService
    auth_service: AuthService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def wire(
    *,
    classes_repo: ClassRepository,
    students_repo: StudentRepository,
    teachers_repo: TeacherRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories."""
    validator = AttendanceValidator(classes_repo, students_repo)

    return Container(
        conn=conn,
        classes_repo=classes_repo,
        students_repo=students_repo,
        teachers_repo=teachers_repo,
        attendance_repo=attendance_repo,
        class_service=ClassService(classes_repo, students_repo, attendance_repo),
        student_service=StudentService(students_repo, classes_repo, attendance_repo),
        teacher_service=TeacherService(teachers_repo),
        auth_service=AuthService(teachers_repo),
        attendance_service=AttendanceService(attendance_repo, validator),
        report_service=AttendanceReportService(attendance_repo, students_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        classes_repo=MySQLClassRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        teachers_repo=MySQLTeacherRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
    )
