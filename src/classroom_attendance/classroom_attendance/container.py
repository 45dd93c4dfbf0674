from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .classes.memory_class_repository import InMemoryClassRepository
from .classes.service import ClassService
from .database.store import InMemoryStore
from .reports.service import AttendanceReportService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: InMemoryStore

    classes_repo: InMemoryClassRepository
    students_repo: InMemoryStudentRepository
    attendance_repo: InMemoryAttendanceRepository

    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_container(*, store: Optional[InMemoryStore] = None) -> Container:
    store = store or InMemoryStore()
    session = store.session

    classes_repo = InMemoryClassRepository(store)
    students_repo = InMemoryStudentRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)

    class_service = ClassService(classes_repo, session)
    student_service = StudentService(students_repo, session)
    attendance_service = AttendanceService(attendance_repo, students_repo, session)
    report_service = AttendanceReportService(attendance_repo, students_repo, classes_repo, session)

    return Container(
        store=store,
        classes_repo=classes_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        class_service=class_service,
        student_service=student_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
