from __future__ import annotations

from typing import Sequence

from ..database.store import InMemoryStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_for_class(self, class_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._store.records if r.class_id == class_id]

    def upsert(self, record: AttendanceRecord) -> None:
        kept = [
            r
            for r in self._store.records
            if not (r.class_id == record.class_id and r.work_date == record.work_date)
        ]
        kept.append(record)
        self._store.records[:] = kept
