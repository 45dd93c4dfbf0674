from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_for_class(self, class_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def add(self, student: Student) -> None:
        raise NotImplementedError
