from __future__ import annotations

from datetime import date

import pytest

from src.classroom_attendance.classroom_attendance.container import build_container
from src.classroom_attendance.classroom_attendance.core.enums import AttendanceStatus

PRESENT = AttendanceStatus.PRESENT
ABSENT = AttendanceStatus.ABSENT


@pytest.fixture
def container():
    c = build_container()
    c.class_service.create_class("Section 001")
    return c


def test_percent_placeholder_without_records(container):
    ann = container.student_service.add_student("Ann")
    assert container.report_service.attendance_percent(ann.student_id) == "—"


def test_percent_over_class_records(container):
    ann = container.student_service.add_student("Ann")
    class_id = container.store.session.active_class_id
    svc = container.attendance_service

    svc.save(class_id, date(2024, 1, 1), {ann.student_id: PRESENT})
    svc.save(class_id, date(2024, 1, 2), {ann.student_id: PRESENT})
    svc.save(class_id, date(2024, 1, 3), {ann.student_id: ABSENT})
    svc.save("other-class", date(2024, 1, 4), {ann.student_id: ABSENT})

    assert container.report_service.attendance_percent(ann.student_id) == "67%"


def test_history_is_newest_first_and_marks_missing_as_absent(container):
    ann = container.student_service.add_student("Ann")
    class_id = container.store.session.active_class_id
    svc = container.attendance_service
    svc.save(class_id, date(2024, 1, 1), {ann.student_id: PRESENT})
    svc.save(class_id, date(2024, 1, 3), {})

    history = container.report_service.history()

    assert [h.date for h in history] == ["2024-01-03", "2024-01-01"]
    assert history[0].class_name == "Section 001"
    assert history[0].statuses[0]["status"] == "absent"
    assert history[1].statuses[0]["present"] is True


def test_roster_summary(container):
    container.student_service.add_student("Ann", "ann@example.com")
    container.student_service.add_student("Bob")

    summary = container.report_service.roster_summary()

    assert [(r["name"], r["email"], r["percent"]) for r in summary] == [
        ("Ann", "ann@example.com", "—"),
        ("Bob", "", "—"),
    ]


def test_export_csv_for_active_class(container):
    ann = container.student_service.add_student("Ann Lee")
    class_id = container.store.session.active_class_id
    container.attendance_service.save(class_id, "2024-02-01", {ann.student_id: PRESENT})
    container.attendance_service.save(class_id, "2024-01-15", {ann.student_id: PRESENT})

    export = container.report_service.export_csv()

    assert export.filename == "Section_001_attendance.csv"
    assert export.content == (
        "date,studentName,studentEmail,status\n"
        '2024-01-15,"Ann Lee","",present\n'
        '2024-02-01,"Ann Lee","",present'
    )


def test_views_are_empty_without_active_class():
    c = build_container()
    assert c.report_service.class_records() == []
    assert c.report_service.history() == []
    assert c.report_service.roster_summary() == []
    assert c.report_service.export_csv().filename == "class_attendance.csv"
