from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import ClassItem
from .repository import ClassRepository


class InMemoryClassRepository(ClassRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[ClassItem]:
        return list(self._store.classes)

    def get_by_id(self, class_id: str) -> Optional[ClassItem]:
        for c in self._store.classes:
            if c.class_id == class_id:
                return c
        return None

    def add(self, item: ClassItem) -> None:
        self._store.classes.append(item)
