from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_TIMEZONE, LEAVE_BADGE_TTL_SECONDS, TIMEZONE_CACHE_TTL_SECONDS
from .leaves.controller import register as register_leaves
from .recap.controller import register as register_recap
from .tukin.controller import register as register_tukin

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def create_app(container: Optional[Any] = None) -> Flask:
    """App factory. Tests pass a prebuilt container to skip MySQL wiring."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))

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
        container = build_container(
            db_config=db_config,
            default_timezone=getattr(settings, "DEFAULT_TIMEZONE", DEFAULT_TIMEZONE),
            timezone_ttl_seconds=int(getattr(settings, "TIMEZONE_CACHE_TTL_SECONDS", TIMEZONE_CACHE_TTL_SECONDS)),
            badge_ttl_seconds=int(getattr(settings, "LEAVE_BADGE_TTL_SECONDS", LEAVE_BADGE_TTL_SECONDS)),
        )

    register_recap(app, container)
    register_tukin(app, container)
    register_leaves(app, container)

    return app
