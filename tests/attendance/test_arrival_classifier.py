from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from workforce_metrics.attendance.classifier import (
    AttendanceClassifier,
    classify_arrival,
    decide_arrival,
    has_overtime,
)
from workforce_metrics.attendance.factory import ArrivalStrategyFactory
from workforce_metrics.attendance.strategies.early_strategy import EarlyArrivalStrategy
from workforce_metrics.attendance.strategies.late_strategy import LateArrivalStrategy
from workforce_metrics.attendance.strategies.on_time_strategy import OnTimeArrivalStrategy
from workforce_metrics.core.enums import ArrivalStatus
from workforce_metrics.core.exceptions import ValidationError
from workforce_metrics.schedules.model import WorkScheduleConfig

NINE = datetime(2025, 1, 6, 9, 0)


@pytest.mark.parametrize(
    "offset, expected",
    [
        (-16, ArrivalStatus.EARLY),
        (-15, ArrivalStatus.EARLY),
        (-14, ArrivalStatus.ON_TIME),
        (0, ArrivalStatus.ON_TIME),
        (15, ArrivalStatus.ON_TIME),
        (16, ArrivalStatus.LATE),
    ],
)
def test_thresholds_are_inclusive(offset, expected):
    schedule = WorkScheduleConfig()
    assert classify_arrival(NINE + timedelta(minutes=offset), schedule) == expected


def test_factory_picks_strategy_by_bucket():
    factory = ArrivalStrategyFactory()
    schedule = WorkScheduleConfig()

    assert isinstance(factory.for_arrival(minutes_from_start=-30, schedule=schedule), EarlyArrivalStrategy)
    assert isinstance(factory.for_arrival(minutes_from_start=3, schedule=schedule), OnTimeArrivalStrategy)
    assert isinstance(factory.for_arrival(minutes_from_start=20.5, schedule=schedule), LateArrivalStrategy)


def test_decision_note_reports_whole_minutes():
    decision = decide_arrival(datetime(2025, 1, 6, 9, 20, 30), WorkScheduleConfig())

    assert decision.status == ArrivalStatus.LATE
    assert decision.note == "Late by 20 min"
    assert decision.minutes_from_start == pytest.approx(20.5)


def test_zero_thresholds_are_honoured():
    schedule = WorkScheduleConfig(early_threshold_minutes=0, late_threshold_minutes=0)

    assert classify_arrival(NINE, schedule) == ArrivalStatus.EARLY
    assert classify_arrival(NINE + timedelta(minutes=1), schedule) == ArrivalStatus.LATE


def test_negative_threshold_is_rejected():
    with pytest.raises(ValidationError):
        WorkScheduleConfig(late_threshold_minutes=-1)


def test_custom_schedule_moves_the_window():
    schedule = WorkScheduleConfig(work_start_time=time(8, 0), work_end_time=time(16, 0), late_threshold_minutes=5)
    classifier = AttendanceClassifier(schedule)

    assert classifier.classify_arrival(datetime(2025, 1, 6, 8, 5)) == ArrivalStatus.ON_TIME
    assert classifier.classify_arrival(datetime(2025, 1, 6, 8, 6)) == ArrivalStatus.LATE
    assert classifier.has_overtime(datetime(2025, 1, 6, 8, 0), datetime(2025, 1, 6, 16, 1))


def test_overtime_is_strictly_after_work_end():
    schedule = WorkScheduleConfig()
    clock_in = datetime(2025, 1, 6, 9, 0)

    assert not has_overtime(clock_in, datetime(2025, 1, 6, 17, 0), schedule)
    assert has_overtime(clock_in, datetime(2025, 1, 6, 17, 0, 1), schedule)
    assert not has_overtime(clock_in, None, schedule)


def test_overtime_uses_the_clock_out_day():
    # Clock-out after midnight but before 17:00 on that day is not overtime.
    schedule = WorkScheduleConfig()
    assert not has_overtime(datetime(2025, 1, 6, 22, 0), datetime(2025, 1, 7, 2, 0), schedule)


def test_aware_timestamps_are_read_in_the_schedule_timezone():
    schedule = WorkScheduleConfig(timezone=ZoneInfo("Asia/Kuala_Lumpur"))
    # 01:20 UTC is 09:20 in Kuala Lumpur.
    clock_in = datetime(2025, 1, 6, 1, 20, tzinfo=timezone.utc)
    clock_out = datetime(2025, 1, 6, 9, 30, tzinfo=timezone.utc)

    assert classify_arrival(clock_in, schedule) == ArrivalStatus.LATE
    assert has_overtime(clock_in, clock_out, schedule)
