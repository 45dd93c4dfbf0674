from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso_date
from ..core.constants import CSV_HEADER, CSV_SUFFIX, EXPORT_FALLBACK_NAME, EXPORT_FILENAME_SUFFIX
from ..students.model import Student


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


def quote_field(value: Optional[str]) -> str:
    """Always-quoted CSV field; embedded quotes are doubled."""
    return '"' + (value or "").replace('"', '""') + '"'


def build_attendance_csv(records: Sequence[AttendanceRecord], students: Sequence[Student]) -> str:
    """Render records as ``date,studentName,studentEmail,status`` rows, oldest first.

    Entries whose student is not in ``students`` are skipped, so are students
    without an entry in a record.
    """
    by_id = {s.student_id: s for s in students}
    lines = [",".join(CSV_HEADER)]

    for r in sorted(records, key=lambda r: r.work_date):
        day = format_iso_date(r.work_date)
        for student_id, status in r.entries.items():
            s = by_id.get(student_id)
            if not s:
                continue
            lines.append(",".join([day, quote_field(s.name), quote_field(s.email), status.value]))

    return "\n".join(lines)


def normalize_csv_filename(filename: str) -> str:
    return filename if filename.endswith(CSV_SUFFIX) else f"{filename}{CSV_SUFFIX}"


def export_filename(class_name: Optional[str]) -> str:
    base = (class_name or EXPORT_FALLBACK_NAME).replace(" ", "_")
    return normalize_csv_filename(f"{base}{EXPORT_FILENAME_SUFFIX}")
