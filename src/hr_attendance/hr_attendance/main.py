from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import setup_logging
from .container import Container, build_container
from .core.enums import NegativeDurationPolicy
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .attendance.controller import register as register_attendance
from .notifications.controller import register as register_notifications

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    When ``container`` is given (tests, scripts) the database bootstrap is
    skipped and the supplied repositories are used as-is.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["TIMEZONE"] = getattr(settings, "TIMEZONE", "Asia/Kolkata")
    app.config["NOTIFICATION_KEEPALIVE_SECONDS"] = getattr(settings, "NOTIFICATION_KEEPALIVE_SECONDS", 15)

    setup_logging(app, getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.debug(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            zone_name=app.config["TIMEZONE"],
            negative_policy=NegativeDurationPolicy(getattr(settings, "NEGATIVE_DURATION_POLICY", "absent")),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("Schema ready (tables=%s)", len(list_tables(container.conn)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(container.conn, seed_path=DATABASE_DIR / "seed.sql")

    app.extensions["container"] = container

    register_attendance(app, container)
    register_notifications(app, container)

    return app
