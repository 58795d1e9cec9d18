from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .core.exceptions import DomainError, MigrationError, NotFoundError, StorageError, ValidationError
from .storage.paths import resolve_data_path
from .attendance.controller import register as register_attendance
from .dogs.controller import register as register_dogs
from .schedules.controller import register as register_schedules
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)

_ERROR_STATUS = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (MigrationError, 500),
    (StorageError, 500),
)


def create_app(*, data_file: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    data_path = resolve_data_path(
        data_file=data_file or getattr(settings, "DATA_FILE", None),
        dev_mode=bool(getattr(settings, "DEV_MODE", False)),
    )
    logger.info("settings=%s data=%s", settings_module, data_path)

    container = build_container(
        data_path=data_path,
        forward_window_days=int(getattr(settings, "FORWARD_WINDOW_DAYS", 30)),
    )
    app.extensions["doggy_daycare"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = next((code for cls, code in _ERROR_STATUS if isinstance(exc, cls)), 400)
        if status >= 500:
            logger.error("Request failed: %s", exc)
        return jsonify({"error": str(exc)}), status

    register_dogs(app, container)
    register_schedules(app, container)
    register_attendance(app, container)
    register_settings(app, container)

    return app
