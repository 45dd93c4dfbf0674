from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional, Union

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_date, require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..database.store import SessionState
from ..students.repository import StudentRepository
from .draft import seed_draft
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark the daily sheet for the active class and save it."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        session: SessionState,
    ):
        self._attendance = attendance
        self._students = students
        self._session = session

    @property
    def attendance_date(self) -> date:
        return self._session.attendance_date

    def set_date(self, value: Union[date, str, None]) -> date:
        self._session.attendance_date = require_date(value)
        return self._session.attendance_date

    def current_draft(self) -> dict[str, AttendanceStatus]:
        """Draft sheet for the active class and date, reseeded when either or the roster size changed."""
        self._reseed_if_needed()
        return dict(self._session.draft_entries)

    def set_status(self, student_id: str, status: Union[AttendanceStatus, str]) -> AttendanceStatus:
        status = require_status(status)
        self._reseed_if_needed()
        if student_id not in self._session.draft_entries:
            raise NotFoundError("Học sinh không thuộc lớp đang chọn")
        self._session.draft_entries[student_id] = status
        return status

    def save_attendance(self) -> Optional[AttendanceRecord]:
        """Save the draft for the active class and date; no active class is a no-op."""
        class_id = self._session.active_class_id
        if not class_id:
            logger.debug("Ignoring save: no active class")
            return None

        return self.save(class_id, self._session.attendance_date, self.current_draft())

    def save(
        self,
        class_id: str,
        work_date: Union[date, str],
        entries: Mapping[str, Union[AttendanceStatus, str]],
    ) -> AttendanceRecord:
        record = AttendanceRecord(
            record_id=new_id(),
            class_id=class_id,
            work_date=require_date(work_date),
            entries={sid: require_status(st) for sid, st in entries.items()},
            created_at=now_local(),
        )
        self._attendance.upsert(record)
        logger.info(
            "Saved attendance for class %s on %s (%d entries)",
            class_id,
            record.work_date.isoformat(),
            len(record.entries),
        )
        return record

    def _reseed_if_needed(self) -> None:
        session = self._session
        if not session.active_class_id:
            return

        roster = self._students.list_for_class(session.active_class_id)
        key = (session.active_class_id, session.attendance_date, len(roster))
        if session.seeded_for == key:
            return

        session.draft_entries = seed_draft(roster, session.draft_entries)
        session.seeded_for = key
