from __future__ import annotations

import importlib
import logging
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_REPORT_MAX_WORKERS
from .performance.controller import register as register_performance

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tz_name = getattr(settings, "ORG_TIMEZONE", None)
    timezone = ZoneInfo(tz_name) if tz_name else None

    logger.info(
        "settings=%s db=%s@%s:%s/%s tz=%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        tz_name,
    )

    container = build_container(
        db_config=db_config,
        timezone=timezone,
        report_max_workers=int(getattr(settings, "REPORT_MAX_WORKERS", DEFAULT_REPORT_MAX_WORKERS)),
        active_hours_per_day=getattr(settings, "DEFAULT_ACTIVE_HOURS_PER_DAY", None),
    )

    register_attendance(app, container)
    register_performance(app, container)

    return app
