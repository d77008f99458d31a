"""Attendance Book (출석부) package.

This package is organized by feature modules (members, sessions, scan, qr, ...)
with a thin Flask controller layer and service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .checkin.controller import register as register_checkin
from .classes.controller import register as register_classes
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_members, list_tables
from .members.controller import register as register_members
from .qr.controller import register as register_qr
from .reports.controller import register as register_reports
from .scan.controller import register as register_scan
from .sessions.controller import register as register_sessions

logger = logging.getLogger("attendance_book")

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass a prebuilt ``container`` to skip the MySQL wiring (tests, scripts).
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_members(db_config)
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            checkin_base_url=getattr(settings, "CHECKIN_BASE_URL", ""),
            qr_size=int(getattr(settings, "QR_SIZE", 250)),
        )

    app.extensions["attendance_book"] = container

    register_classes(app, container)
    register_members(app, container)
    register_sessions(app, container)
    register_scan(app, container)
    register_qr(app, container)
    register_checkin(app, container)
    register_reports(app, container)

    return app
