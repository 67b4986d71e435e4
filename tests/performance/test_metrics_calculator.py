from datetime import date, datetime, timedelta

import pytest

from workforce_metrics.core.enums import Role, TaskStatus
from workforce_metrics.members.model import Member
from workforce_metrics.performance.calculator.standard_calculator import StandardMetricsCalculator
from workforce_metrics.performance.model import DateRange
from workforce_metrics.tasks.model import Project, TaskRecord, TimeLogEntry

JANUARY = DateRange.from_dates(date(2025, 1, 1), date(2025, 1, 31))


def _task(task_id, status=TaskStatus.DONE, *, created, updated=None, due=None, assignee="u1"):
    return TaskRecord(
        id=task_id,
        project_id="p1",
        status=status,
        created_at=created,
        updated_at=updated or created,
        due_date=due,
        assignee_id=assignee,
    )


def test_empty_inputs_give_zero_metrics():
    metrics = StandardMetricsCalculator().compute_user_performance([], [], "u1", JANUARY)

    assert metrics.tasks_completed == 0
    assert metrics.average_lead_time_days == 0
    assert metrics.average_cycle_time_days == 0
    assert metrics.on_time_delivery_rate == 0
    assert metrics.total_logged_hours == 0
    assert metrics.focus_ratio == 0
    assert metrics.user_name == "Unknown"


def test_no_due_date_counts_as_on_time():
    late_finish = _task("t1", created=datetime(2025, 1, 2), updated=datetime(2025, 1, 30))

    metrics = StandardMetricsCalculator().compute_user_performance([late_finish], [], "u1", JANUARY)

    assert metrics.on_time_delivery_rate == 100


def test_user_metrics():
    tasks = [
        _task("t1", created=datetime(2025, 1, 1), updated=datetime(2025, 1, 3), due=datetime(2025, 1, 5)),
        _task("t2", created=datetime(2025, 1, 1), updated=datetime(2025, 1, 6), due=datetime(2025, 1, 4)),
        _task("t3", TaskStatus.IN_PROGRESS, created=datetime(2025, 1, 1)),
        _task("t4", created=datetime(2025, 1, 1), updated=datetime(2025, 1, 2), assignee="u2"),
    ]
    logs = [
        TimeLogEntry("t1", "u1", datetime(2025, 1, 2), duration_seconds=3600),
        TimeLogEntry("t1", "u1", datetime(2025, 1, 2, 12), duration_seconds=1800),
        TimeLogEntry("t2", "u1", datetime(2025, 1, 4), duration_seconds=None),
        TimeLogEntry("t4", "u2", datetime(2025, 1, 1), duration_seconds=7200),
    ]
    member = Member("u1", "org-1", Role.EMPLOYEE, "alice@example.com", "Alice")

    metrics = StandardMetricsCalculator().compute_user_performance(
        tasks, logs, "u1", JANUARY, active_hours=3, member=member
    )

    assert metrics.tasks_completed == 2
    assert metrics.average_lead_time_days == 3.5
    # t1: Jan 2 -> Jan 3, t2: Jan 4 -> Jan 6
    assert metrics.average_cycle_time_days == 1.5
    assert metrics.on_time_delivery_rate == 50
    assert metrics.total_logged_hours == 1.5
    assert metrics.focus_ratio == 0.5
    assert metrics.user_name == "Alice"
    assert metrics.user_role == "employee"


def test_focus_ratio_is_capped():
    logs = [TimeLogEntry("t1", "u1", datetime(2025, 1, 2), duration_seconds=10 * 3600)]

    metrics = StandardMetricsCalculator().compute_user_performance([], logs, "u1", JANUARY, active_hours=4)

    assert metrics.focus_ratio == 1.0


def test_single_day_throughput_uses_one_week():
    day = DateRange.from_dates(date(2025, 1, 6), date(2025, 1, 6))
    tasks = [_task(f"t{i}", TaskStatus.TODO, created=datetime(2025, 1, 6, 9 + i)) for i in range(3)]

    metrics = StandardMetricsCalculator().compute_project_performance(tasks, day, now=datetime(2025, 1, 6, 18))

    assert day.weeks == 1
    assert metrics.throughput == 3
    assert metrics.wip == 3


def test_project_metrics():
    now = datetime(2025, 1, 20)
    tasks = [
        _task("t1", created=datetime(2025, 1, 1), updated=datetime(2025, 1, 3)),
        _task("t2", TaskStatus.IN_PROGRESS, created=datetime(2025, 1, 2), due=datetime(2025, 1, 10)),
        _task("t3", TaskStatus.IN_REVIEW, created=datetime(2025, 1, 5), due=datetime(2025, 1, 22)),
        _task("t4", TaskStatus.BLOCKED, created=datetime(2024, 12, 1)),
    ]

    metrics = StandardMetricsCalculator().compute_project_performance(
        tasks, JANUARY, now=now, project=Project("p1", "Website", "org-1")
    )

    assert metrics.project_name == "Website"
    assert metrics.completion_rate == 25
    assert metrics.overdue_tasks == 1
    assert metrics.nearing_due_tasks == 1
    assert metrics.sla_breach_rate == 25
    assert metrics.average_cycle_time_days == 2
    assert metrics.wip == 2
    assert metrics.throughput == pytest.approx(0.7)


def test_empty_project_has_zero_rates():
    metrics = StandardMetricsCalculator().compute_project_performance([], JANUARY, now=datetime(2025, 1, 20))

    assert metrics.completion_rate == 0
    assert metrics.sla_breach_rate == 0
    assert metrics.throughput == 0


def test_date_range_weeks_never_below_one():
    assert DateRange(datetime(2025, 1, 1), datetime(2025, 1, 1)).weeks == 1
    assert DateRange(datetime(2025, 1, 1), datetime(2025, 1, 1) + timedelta(days=14)).weeks == 2
