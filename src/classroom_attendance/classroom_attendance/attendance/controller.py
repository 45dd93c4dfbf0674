from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_iso_date
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        active = container.class_service.get_active_class()
        draft = container.attendance_service.current_draft()
        return render_template(
            "index.html",
            classes=container.class_service.list_classes(),
            active_class=active,
            roster=container.report_service.roster_summary(),
            draft={sid: st.value for sid, st in draft.items()},
            attendance_date=format_iso_date(container.attendance_service.attendance_date),
            history=container.report_service.history(),
        )

    @app.route("/attendance/date", methods=["POST"], endpoint="attendance_date")
    def attendance_date():
        try:
            container.attendance_service.set_date(request.form.get("date", ""))
        except DomainError as e:
            flash(str(e), "warning")
        return redirect(url_for("index"))

    @app.route("/attendance/status", methods=["POST"], endpoint="attendance_status")
    def attendance_status():
        try:
            container.attendance_service.set_status(
                request.form.get("student_id", ""),
                request.form.get("status", ""),
            )
        except DomainError as e:
            flash(str(e), "warning")
        return redirect(url_for("index"))

    @app.route("/attendance/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        try:
            record = container.attendance_service.save_attendance()
            if record:
                flash(f"Đã lưu điểm danh ngày {format_iso_date(record.work_date)}", "success")
        except DomainError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Saving attendance failed")
            flash("Lỗi hệ thống khi lưu điểm danh", "danger")
        return redirect(url_for("index"))
