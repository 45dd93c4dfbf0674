from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học sinh thuộc đúng một lớp."""

    student_id: str
    class_id: str
    name: str
    email: Optional[str]
    created_at: datetime
