from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .container import build_container, build_store
from .database.kv_store import KeyValueStore
from .grades.controller import register as register_grades
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    backend = getattr(settings, "STORAGE_BACKEND", "memory")
    if store is None:
        store = build_store(
            backend,
            storage_path=getattr(settings, "STORAGE_PATH", None),
            db_config=getattr(settings, "DB_CONFIG", None),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
    logger.info("settings=%s storage=%s", settings_module, backend)

    container = build_container(store=store)
    if bool(getattr(settings, "AUTO_SEED", True)):
        container.initialize_storage()
    app.extensions["school_attendance"] = container

    register_users(app, container)
    register_teachers(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_grades(app, container)
    register_reports(app, container)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return jsonify({"success": False, "message": e.description}), e.code
        logger.exception("Unhandled error")
        return jsonify({"success": False, "message": "Internal error"}), 500

    return app
