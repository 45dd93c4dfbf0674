from __future__ import annotations

from flask import Flask, redirect, request, url_for

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["POST"], endpoint="student_create")
    def student_create():
        container.student_service.add_student(
            request.form.get("name", ""),
            request.form.get("email", ""),
        )
        return redirect(url_for("index"))
