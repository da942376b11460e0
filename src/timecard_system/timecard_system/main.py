from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .justifications.controller import register as register_justifications
from .logging_utils import setup_logging
from .payroll.controller import register as register_payroll
from .settings.controller import register as register_settings
from .settings.model import SnapSettings

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_logs=bool(getattr(settings, "JSON_LOGS", False)))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "starting timecard system",
            extra={
                "settings": settings_module,
                "db": f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
            },
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready", extra={"tables": len(list_tables(db_config))})
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")

        container = build_container(
            db_config=db_config,
            snap_defaults=SnapSettings.from_raw(
                overtime_snap_minutes=getattr(settings, "OVERTIME_SNAP_MINUTES", None),
                permesso_snap_minutes=getattr(settings, "PERMESSO_SNAP_MINUTES", None),
            ),
            implicit_permission_hours=bool(getattr(settings, "IMPLICIT_PERMISSION_HOURS", True)),
        )

    register_attendance(app, container)
    register_justifications(app, container)
    register_payroll(app, container)
    register_settings(app, container)

    return app
