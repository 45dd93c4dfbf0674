from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClassItem:
    """Thực thể miền (domain): Lớp học / Section."""

    class_id: str
    name: str
    created_at: datetime
