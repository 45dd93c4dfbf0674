from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim a form value; blank input becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_date(value: Union[date, str, None], field_name: str = "Ngày") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    try:
        return parse_iso_date(value.strip())
    except ValueError as e:
        raise ValidationError(f"{field_name} không hợp lệ: {value}") from e


def require_status(value: Union[AttendanceStatus, str, None]) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus((value or "").strip().lower())
    except ValueError as e:
        raise ValidationError(f"Trạng thái không hợp lệ: {value}") from e
