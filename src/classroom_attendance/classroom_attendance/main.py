from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .container import build_container
from .logging_setup import configure_logging
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

SETTINGS_KEYS = ("DEBUG", "TESTING", "DEFAULT_CLASS_NAME", "LOG_LEVEL", "LOG_JSON", "HOST", "PORT")


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    for key in SETTINGS_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"), json_logs=bool(app.config.get("LOG_JSON", False)))
    logger.info("Starting classroom-attendance (settings=%s)", settings_module)

    container = build_container()
    container.class_service.ensure_default_class(app.config.get("DEFAULT_CLASS_NAME"))
    app.extensions["classroom_attendance"] = container

    register_attendance(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_reports(app, container)

    return app


def run() -> None:
    app = create_app()
    # One store per process; handlers run one at a time.
    app.run(
        host=app.config.get("HOST", "127.0.0.1"),
        port=int(app.config.get("PORT", 5000)),
        debug=bool(app.config.get("DEBUG", False)),
        threaded=False,
    )


if __name__ == "__main__":
    run()
