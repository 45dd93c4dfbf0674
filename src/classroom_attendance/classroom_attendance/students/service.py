from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import clean_text
from ..database.store import SessionState
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage the roster of the active class."""

    def __init__(self, students: StudentRepository, session: SessionState):
        self._students = students
        self._session = session

    def add_student(self, name: Optional[str], email: Optional[str] = None) -> Optional[Student]:
        class_id = self._session.active_class_id
        if not class_id:
            logger.debug("Ignoring new student: no active class")
            return None

        name = clean_text(name)
        if not name:
            logger.debug("Ignoring new student with blank name")
            return None

        student = Student(
            student_id=new_id(),
            class_id=class_id,
            name=name,
            email=clean_text(email),
            created_at=now_local(),
        )
        self._students.add(student)
        logger.info("Added student %s to class %s", student.student_id, class_id)
        return student

    def roster(self, class_id: str) -> Sequence[Student]:
        return self._students.list_for_class(class_id)

    def active_roster(self) -> Sequence[Student]:
        if not self._session.active_class_id:
            return []
        return self.roster(self._session.active_class_id)
