from __future__ import annotations

from typing import Sequence

from ..database.store import InMemoryStore
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_for_class(self, class_id: str) -> Sequence[Student]:
        return [s for s in self._store.students if s.class_id == class_id]

    def add(self, student: Student) -> None:
        self._store.students.append(student)
