import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ORG_TIMEZONE = os.getenv("ORG_TIMEZONE", "Asia/Kuala_Lumpur")
REPORT_MAX_WORKERS = int(os.getenv("REPORT_MAX_WORKERS", "3"))

_active_hours = os.getenv("DEFAULT_ACTIVE_HOURS_PER_DAY")
DEFAULT_ACTIVE_HOURS_PER_DAY = float(_active_hours) if _active_hours else None
