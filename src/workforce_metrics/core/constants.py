"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_WORK_START_TIME = time(9, 0, 0)
DEFAULT_WORK_END_TIME = time(17, 0, 0)
DEFAULT_EARLY_THRESHOLD_MINUTES = 15
DEFAULT_LATE_THRESHOLD_MINUTES = 15

NEARING_DUE_DAYS = 3
HEALTHY_COMPLETION_RATE = 50

DEFAULT_REPORT_DAYS = 30
DEFAULT_ABSENCE_LOOKBACK_DAYS = 30
DEFAULT_REPORT_MAX_WORKERS = 3
