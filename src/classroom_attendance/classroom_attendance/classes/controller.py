from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes", methods=["POST"], endpoint="class_create")
    def class_create():
        # Blank names are ignored without a message.
        container.class_service.create_class(request.form.get("name", ""))
        return redirect(url_for("index"))

    @app.route("/classes/select", methods=["POST"], endpoint="class_select")
    def class_select():
        try:
            container.class_service.select_class(request.form.get("class_id", ""))
        except DomainError as e:
            flash(str(e), "warning")
        return redirect(url_for("index"))
