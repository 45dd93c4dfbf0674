from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

PACKAGE_LOGGER = __name__.rsplit(".", 1)[0]
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", *, json_logs: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Called from create_app; repeated calls replace the handler instead of stacking.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
