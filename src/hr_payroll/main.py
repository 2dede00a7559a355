from __future__ import annotations

import importlib
import logging
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .common.http import ok, register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_default_admin, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    Without ``container`` the MySQL repositories from ``DB_CONFIG`` are used;
    tests pass a container wired to in-memory repositories instead.
    """

    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, settings=settings)

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_default_admin(db_config, container.verifier)

    logger.info("auth strategy=%s", container.identity.name.value)
    app.extensions["hr_payroll"] = container

    register_error_handlers(app)

    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return ok(
            {
                "message": "Payroll Management System - Server Running",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "authStrategy": container.identity.name.value,
            }
        )

    register_auth(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    return app
