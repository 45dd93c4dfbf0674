from __future__ import annotations

import io
import logging

from flask import Flask, flash, jsonify, redirect, send_file, url_for

from ..common.datetime_utils import format_iso_date
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/export.csv", methods=["GET"], endpoint="attendance_export")
    def attendance_export():
        if not container.report_service.class_records():
            flash("Chưa có dữ liệu điểm danh để xuất", "warning")
            return redirect(url_for("index"))

        export = container.report_service.export_csv()
        logger.info("Exporting %s", export.filename)
        return send_file(
            io.BytesIO(export.content.encode("utf-8")),
            mimetype="text/csv",
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/api/state", methods=["GET"], endpoint="api_state")
    def api_state():
        """JSON snapshot of the page state (classes, roster, draft, history)."""
        active = container.class_service.get_active_class()
        draft = container.attendance_service.current_draft()
        return jsonify(
            {
                "classes": [
                    {"id": c.class_id, "name": c.name} for c in container.class_service.list_classes()
                ],
                "active_class_id": active.class_id if active else None,
                "attendance_date": format_iso_date(container.attendance_service.attendance_date),
                "roster": container.report_service.roster_summary(),
                "draft": {sid: st.value for sid, st in draft.items()},
                "history": [
                    {"id": h.record_id, "date": h.date, "class_name": h.class_name, "statuses": h.statuses}
                    for h in container.report_service.history()
                ],
            }
        )
