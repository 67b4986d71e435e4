from __future__ import annotations

from dataclasses import dataclass

from ..schedules.model import WorkScheduleConfig
from .strategies.base import ArrivalStrategy
from .strategies.early_strategy import EarlyArrivalStrategy
from .strategies.late_strategy import LateArrivalStrategy
from .strategies.on_time_strategy import OnTimeArrivalStrategy


@dataclass
class ArrivalStrategyFactory:
    """Factory Pattern: choose the arrival strategy from the schedule thresholds.

    Both thresholds are inclusive: exactly ``early_threshold_minutes`` before
    start is early, exactly ``late_threshold_minutes`` after start is on time.
    """

    def for_arrival(self, *, minutes_from_start: float, schedule: WorkScheduleConfig) -> ArrivalStrategy:
        if minutes_from_start <= -schedule.early_threshold_minutes:
            return EarlyArrivalStrategy()
        if minutes_from_start <= schedule.late_threshold_minutes:
            return OnTimeArrivalStrategy()
        return LateArrivalStrategy()
