from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..classes.model import ClassItem
from ..common.datetime_utils import today_local
from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass
class SessionState:
    """Trạng thái giao diện của phiên làm việc (lớp đang chọn, ngày, bản nháp)."""

    active_class_id: Optional[str] = None
    attendance_date: date = field(default_factory=today_local)
    draft_entries: dict[str, AttendanceStatus] = field(default_factory=dict)
    # (class_id, date, roster size) the draft was last seeded for
    seeded_for: Optional[tuple[str, date, int]] = None


@dataclass
class InMemoryStore:
    """Application state for one running app.

    Lưu ý: Không có lưu trữ bền vững; dữ liệu mất khi tiến trình kết thúc.
    The store is created by ``build_container`` and handed to every
    repository explicitly, there is no module-level instance.
    """

    classes: list[ClassItem] = field(default_factory=list)
    students: list[Student] = field(default_factory=list)
    records: list[AttendanceRecord] = field(default_factory=list)
    session: SessionState = field(default_factory=SessionState)
