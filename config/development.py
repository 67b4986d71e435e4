import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Wall clock that work_start_time / work_end_time are written in.
ORG_TIMEZONE = os.getenv("ORG_TIMEZONE", "Asia/Kuala_Lumpur")

REPORT_MAX_WORKERS = int(os.getenv("REPORT_MAX_WORKERS", "3"))

# Denominator of focus_ratio; unset means focus_ratio is reported as 0.
_active_hours = os.getenv("DEFAULT_ACTIVE_HOURS_PER_DAY")
DEFAULT_ACTIVE_HOURS_PER_DAY = float(_active_hours) if _active_hours else None
