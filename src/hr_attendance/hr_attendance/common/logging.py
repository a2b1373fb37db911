"""Logging setup for the Flask app."""
from __future__ import annotations

import logging

from flask import Flask

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(app: Flask, level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the app logger and the package loggers."""
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    app.logger.setLevel(log_level)
    if not any(isinstance(h, logging.StreamHandler) for h in app.logger.handlers):
        app.logger.addHandler(handler)

    # Service modules log under the package name.
    package_logger = logging.getLogger(__name__.split(".common")[0])
    package_logger.setLevel(log_level)
    if not package_logger.handlers:
        package_logger.addHandler(handler)

    logging.getLogger("werkzeug").setLevel(log_level)
    return app.logger
