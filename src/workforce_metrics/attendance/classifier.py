from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import at_time_of_day, to_local
from ..core.enums import ArrivalStatus
from ..schedules.model import WorkScheduleConfig
from .factory import ArrivalStrategyFactory
from .strategies.base import ArrivalDecision

_DEFAULT_FACTORY = ArrivalStrategyFactory()


def minutes_from_start(clock_in_at: datetime, schedule: WorkScheduleConfig) -> float:
    """Signed minutes between a clock-in and work start on the same calendar day."""
    local = to_local(clock_in_at, schedule.timezone)
    scheduled_start = at_time_of_day(local, schedule.work_start_time)
    return (local - scheduled_start) / timedelta(minutes=1)


def decide_arrival(
    clock_in_at: datetime,
    schedule: WorkScheduleConfig,
    *,
    factory: ArrivalStrategyFactory = _DEFAULT_FACTORY,
) -> ArrivalDecision:
    diff = minutes_from_start(clock_in_at, schedule)
    strategy = factory.for_arrival(minutes_from_start=diff, schedule=schedule)
    return strategy.decide(minutes_from_start=diff)


def classify_arrival(clock_in_at: datetime, schedule: WorkScheduleConfig) -> ArrivalStatus:
    return decide_arrival(clock_in_at, schedule).status


def has_overtime(
    clock_in_at: Optional[datetime],
    clock_out_at: Optional[datetime],
    schedule: WorkScheduleConfig,
) -> bool:
    """True iff the clock-out is strictly after work end on the clock-out's own day."""
    if clock_out_at is None:
        return False
    local_out = to_local(clock_out_at, schedule.timezone)
    return local_out > at_time_of_day(local_out, schedule.work_end_time)


@dataclass
class AttendanceClassifier:
    """Classifier bound to one organization's schedule."""

    schedule: WorkScheduleConfig
    factory: ArrivalStrategyFactory = field(default_factory=ArrivalStrategyFactory)

    def decide(self, clock_in_at: datetime) -> ArrivalDecision:
        return decide_arrival(clock_in_at, self.schedule, factory=self.factory)

    def classify_arrival(self, clock_in_at: datetime) -> ArrivalStatus:
        return self.decide(clock_in_at).status

    def has_overtime(self, clock_in_at: Optional[datetime], clock_out_at: Optional[datetime]) -> bool:
        return has_overtime(clock_in_at, clock_out_at, self.schedule)
