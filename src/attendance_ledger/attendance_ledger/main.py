from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .attendance.controller import register as register_attendance
from .container import Container, build_container

logger = logging.getLogger(__name__)


def create_app(settings=None, *, container: Optional[Container] = None) -> Flask:
    """Flask app factory.

    ``settings`` is a settings module (or any object with the same attributes);
    by default it is picked from ``APP_ENV`` after loading ``.env``.
    """
    load_dotenv(override=False)
    if settings is None:
        settings = importlib.import_module(get_settings_module())

    debug = bool(getattr(settings, "DEBUG", False))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = debug
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = container or build_container(settings)
    app.extensions["attendance_ledger"] = container

    register_attendance(app, container)
    register_admin(app, container)

    logger.info("attendance-ledger ready (store=%s)", type(container.store).__name__)
    return app
