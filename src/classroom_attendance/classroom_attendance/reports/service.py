from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus
from ..database.store import SessionState
from ..students.repository import StudentRepository
from .csv_export import CsvExport, build_attendance_csv, export_filename
from .stats import format_percent, percent_present


@dataclass(frozen=True)
class HistoryRow:
    """Read-model phục vụ hiển thị lịch sử điểm danh."""

    record_id: str
    date: str
    class_name: str
    statuses: list[dict]


class AttendanceReportService:
    """Derived views over the store: history, percentages and CSV export.

    Nothing is cached; each call recomputes from the base records.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        classes: ClassRepository,
        session: SessionState,
    ):
        self._attendance = attendance
        self._students = students
        self._classes = classes
        self._session = session

    def _class_id(self, class_id: Optional[str]) -> Optional[str]:
        return class_id or self._session.active_class_id

    def class_records(self, class_id: Optional[str] = None):
        """Records of the class, newest first."""
        cid = self._class_id(class_id)
        if not cid:
            return []
        return sorted(self._attendance.list_for_class(cid), key=lambda r: r.work_date, reverse=True)

    def attendance_percent(self, student_id: str, class_id: Optional[str] = None) -> str:
        return format_percent(percent_present(self.class_records(class_id), student_id))

    def roster_summary(self, class_id: Optional[str] = None) -> list[dict]:
        cid = self._class_id(class_id)
        if not cid:
            return []
        records = self.class_records(cid)
        return [
            {
                "student_id": s.student_id,
                "name": s.name,
                "email": s.email or "",
                "percent": format_percent(percent_present(records, s.student_id)),
            }
            for s in self._students.list_for_class(cid)
        ]

    def history(self, class_id: Optional[str] = None) -> list[HistoryRow]:
        cid = self._class_id(class_id)
        if not cid:
            return []
        item = self._classes.get_by_id(cid)
        roster = self._students.list_for_class(cid)

        rows = []
        for r in self.class_records(cid):
            statuses = []
            for s in roster:
                status = r.status_for(s.student_id)
                statuses.append(
                    {
                        "student_id": s.student_id,
                        "name": s.name,
                        "status": status.value,
                        "present": status == AttendanceStatus.PRESENT,
                    }
                )
            rows.append(
                HistoryRow(
                    record_id=r.record_id,
                    date=format_iso_date(r.work_date),
                    class_name=item.name if item else "",
                    statuses=statuses,
                )
            )
        return rows

    def export_csv(self, class_id: Optional[str] = None) -> CsvExport:
        cid = self._class_id(class_id)
        item = self._classes.get_by_id(cid) if cid else None
        records = self.class_records(cid) if cid else []
        students = self._students.list_for_class(cid) if cid else []
        return CsvExport(
            filename=export_filename(item.name if item else None),
            content=build_attendance_csv(records, students),
        )
