from __future__ import annotations

from dataclasses import dataclass
from datetime import time, tzinfo
from typing import Any, Mapping, Optional

from ..common.validators import require_non_negative
from ..core.constants import (
    DEFAULT_EARLY_THRESHOLD_MINUTES,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_WORK_END_TIME,
    DEFAULT_WORK_START_TIME,
)


@dataclass(frozen=True)
class WorkScheduleConfig:
    """Per-organization work window used to classify attendance."""

    work_start_time: time = DEFAULT_WORK_START_TIME
    work_end_time: time = DEFAULT_WORK_END_TIME
    early_threshold_minutes: int = DEFAULT_EARLY_THRESHOLD_MINUTES
    late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES
    timezone: Optional[tzinfo] = None

    def __post_init__(self) -> None:
        require_non_negative(self.early_threshold_minutes, "early_threshold_minutes")
        require_non_negative(self.late_threshold_minutes, "late_threshold_minutes")

    @classmethod
    def from_row(cls, row: Mapping[str, Any], *, timezone: Optional[tzinfo] = None) -> "WorkScheduleConfig":
        """Build from an organization row; unset columns fall back one by one."""

        def pick(key: str, default):
            value = row.get(key)
            return default if value is None else value

        return cls(
            work_start_time=pick("work_start_time", DEFAULT_WORK_START_TIME),
            work_end_time=pick("work_end_time", DEFAULT_WORK_END_TIME),
            early_threshold_minutes=int(pick("early_threshold_minutes", DEFAULT_EARLY_THRESHOLD_MINUTES)),
            late_threshold_minutes=int(pick("late_threshold_minutes", DEFAULT_LATE_THRESHOLD_MINUTES)),
            timezone=timezone,
        )
