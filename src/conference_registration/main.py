from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendees.controller import register as register_attendees
from .common.http import register_error_handlers
from .common.logging_config import DEFAULT_LOG_FORMAT, setup_logging
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_API_PREFIX
from .database.bootstrap import apply_schema, ensure_sample_data, list_tables
from .database.connection import DBConfig
from .registrations.controller import register as register_registrations
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Without a prebuilt container the database is prepared (per settings) and
    verified; an unreachable database raises PersistenceError here.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_PREFIX"] = str(getattr(settings, "API_PREFIX", DEFAULT_API_PREFIX)).rstrip("/")
    app.json.sort_keys = False

    setup_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        getattr(settings, "LOG_FILE", None),
        fmt=getattr(settings, "LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_sample_data(db_config)

        container = build_container(db_config=db_config)
        container.conn.verify()
        logger.info("Database connection established")

    app.extensions["container"] = container

    register_error_handlers(app)
    register_attendees(app, container)
    register_sessions(app, container)
    register_registrations(app, container)

    @app.route(f"{app.config['API_PREFIX']}/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
