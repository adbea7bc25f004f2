from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_HISTORY_LIMIT
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Pass a prebuilt container to run without MySQL (tests)."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CURRENCY_SYMBOL"] = getattr(settings, "CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)
    history_limit = int(getattr(settings, "HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, history_limit=history_limit)

    app.extensions["staff_portal"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    return app
