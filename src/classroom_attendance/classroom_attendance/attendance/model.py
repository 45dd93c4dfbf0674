from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản điểm danh của một lớp trong một ngày.

    Natural key is (class_id, work_date); entries map student_id -> status.
    """

    record_id: str
    class_id: str
    work_date: date
    entries: dict[str, AttendanceStatus]
    created_at: datetime

    def status_for(self, student_id: str) -> AttendanceStatus:
        return self.entries.get(student_id, AttendanceStatus.ABSENT)
