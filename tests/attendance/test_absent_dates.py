from datetime import date, datetime

from workforce_metrics.attendance.aggregator import list_absent_dates
from workforce_metrics.attendance.model import ClockEvent
from workforce_metrics.schedules.model import WorkScheduleConfig


def _present(day: date) -> ClockEvent:
    return ClockEvent(
        user_id="u1",
        organization_id="org-1",
        local_date=day,
        clock_in_at=datetime(day.year, day.month, day.day, 9, 0),
    )


def test_days_without_records_newest_first():
    records = [_present(date(2025, 1, 2)), _present(date(2025, 1, 4))]

    absent = list_absent_dates(
        records,
        start=date(2025, 1, 1),
        end=date(2025, 1, 4),
        now=datetime(2025, 1, 10, 12, 0),
        schedule=WorkScheduleConfig(),
    )

    assert absent == [date(2025, 1, 3), date(2025, 1, 1)]


def test_today_counts_only_after_work_end():
    kwargs = dict(start=date(2025, 1, 9), end=date(2025, 1, 10), schedule=WorkScheduleConfig())

    during = list_absent_dates([], now=datetime(2025, 1, 10, 12, 0), **kwargs)
    after = list_absent_dates([], now=datetime(2025, 1, 10, 17, 5), **kwargs)

    assert during == [date(2025, 1, 9)]
    assert after == [date(2025, 1, 10), date(2025, 1, 9)]


def test_future_days_are_never_absent():
    absent = list_absent_dates(
        [],
        start=date(2025, 1, 10),
        end=date(2025, 1, 12),
        now=datetime(2025, 1, 10, 8, 0),
        schedule=WorkScheduleConfig(),
    )
    assert absent == []
