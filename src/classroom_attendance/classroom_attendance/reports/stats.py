from __future__ import annotations

import math
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import PERCENT_PLACEHOLDER
from ..core.enums import AttendanceStatus


def percent_present(records: Sequence[AttendanceRecord], student_id: str) -> Optional[int]:
    """Share of records marking the student present, as a whole percent.

    Returns None when there are no records. Halves round up (12.5 -> 13).
    """
    if not records:
        return None
    present = sum(1 for r in records if r.entries.get(student_id) == AttendanceStatus.PRESENT)
    return int(math.floor(present * 100 / len(records) + 0.5))


def format_percent(value: Optional[int]) -> str:
    if value is None:
        return PERCENT_PLACEHOLDER
    return f"{value}%"
