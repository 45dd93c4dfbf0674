from __future__ import annotations

from datetime import datetime

from src.classroom_attendance.classroom_attendance.attendance.draft import seed_draft
from src.classroom_attendance.classroom_attendance.core.enums import AttendanceStatus
from src.classroom_attendance.classroom_attendance.students.model import Student

PRESENT = AttendanceStatus.PRESENT
ABSENT = AttendanceStatus.ABSENT


def _student(sid: str) -> Student:
    return Student(student_id=sid, class_id="c1", name=sid.upper(), email=None, created_at=datetime(2024, 1, 1))


def test_seed_keeps_marked_status_and_defaults_rest_to_absent():
    roster = [_student("a"), _student("b"), _student("c")]

    seeded = seed_draft(roster, {"a": PRESENT})

    assert seeded == {"a": PRESENT, "b": ABSENT, "c": ABSENT}


def test_reseed_after_new_student_never_loses_prior_status():
    roster = [_student("a"), _student("b"), _student("c")]
    seeded = seed_draft(roster, {"a": PRESENT})

    reseeded = seed_draft(roster + [_student("d")], seeded)

    assert reseeded == {"a": PRESENT, "b": ABSENT, "c": ABSENT, "d": ABSENT}


def test_seed_is_idempotent():
    roster = [_student("a"), _student("b")]
    once = seed_draft(roster, {"b": PRESENT})
    assert seed_draft(roster, once) == once


def test_students_outside_roster_are_dropped():
    seeded = seed_draft([_student("a")], {"a": PRESENT, "gone": PRESENT})
    assert seeded == {"a": PRESENT}


def test_empty_roster_yields_empty_draft():
    assert seed_draft([], {"a": PRESENT}) == {}
