from __future__ import annotations

from datetime import date, datetime, timedelta

from src.classroom_attendance.classroom_attendance.attendance.model import AttendanceRecord
from src.classroom_attendance.classroom_attendance.core.enums import AttendanceStatus
from src.classroom_attendance.classroom_attendance.reports.stats import format_percent, percent_present


def _records(statuses):
    start = date(2024, 1, 1)
    return [
        AttendanceRecord(
            record_id=f"r{i}",
            class_id="c1",
            work_date=start + timedelta(days=i),
            entries={"s1": st} if st else {},
            created_at=datetime(2024, 1, 1),
        )
        for i, st in enumerate(statuses)
    ]


def test_no_records_gives_placeholder():
    assert percent_present([], "s1") is None
    assert format_percent(percent_present([], "s1")) == "—"


def test_percent_rounds_to_whole_number():
    p, a = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT
    assert percent_present(_records([p, p, a]), "s1") == 67
    assert percent_present(_records([p, a, a]), "s1") == 33
    assert percent_present(_records([p, p]), "s1") == 100
    assert percent_present(_records([a]), "s1") == 0


def test_half_rounds_up():
    p, a = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT
    assert percent_present(_records([p] + [a] * 7), "s1") == 13
    assert percent_present(_records([p, a]), "s1") == 50


def test_missing_entry_counts_as_absent_but_still_counts_the_day():
    p = AttendanceStatus.PRESENT
    assert percent_present(_records([p, None, None, None]), "s1") == 25


def test_format_percent():
    assert format_percent(67) == "67%"
    assert format_percent(0) == "0%"
