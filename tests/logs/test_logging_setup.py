from __future__ import annotations

import io
import json
import logging

from src.classroom_attendance.classroom_attendance.logging_setup import PACKAGE_LOGGER, configure_logging


def test_json_logs_are_one_object_per_line():
    logger = configure_logging("INFO", json_logs=True)
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)

    logging.getLogger(f"{PACKAGE_LOGGER}.classes.service").info("Created class %s", "Math")

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "Created class Math"
    assert payload["levelname"] == "INFO"


def test_reconfiguring_replaces_handler():
    configure_logging("DEBUG")
    logger = configure_logging("WARNING")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
