from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của một học sinh trong một buổi."""

    PRESENT = "present"
    ABSENT = "absent"
