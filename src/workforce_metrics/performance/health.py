from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import elapsed_days, now_local, start_of_day
from ..common.numbers import mean, percentage, round_half_up
from ..core.constants import HEALTHY_COMPLETION_RATE
from ..core.enums import ProjectHealth
from ..tasks.model import TaskRecord
from .model import ProjectHealthSummary


def _today(today: Optional[datetime]) -> datetime:
    return start_of_day(today or now_local())


def classify_health(*, overdue: int, nearing_due: int, completion_rate: float) -> ProjectHealth:
    if overdue > 0:
        return ProjectHealth.BLOCKED
    if nearing_due > 0 or completion_rate < HEALTHY_COMPLETION_RATE:
        return ProjectHealth.AT_RISK
    return ProjectHealth.GOOD


def summarize_health(tasks: Sequence[TaskRecord], *, today: Optional[datetime] = None) -> ProjectHealthSummary:
    """Health of one project's live task set, at day granularity.

    Overdue dominates: any overdue task makes the project Blocked whatever its
    completion rate. An empty project is At Risk (0% complete).
    """

    as_of = _today(today)
    done = [t for t in tasks if t.is_done]
    overdue = sum(1 for t in tasks if t.is_overdue(as_of))
    nearing_due = sum(1 for t in tasks if t.is_nearing_due(as_of))
    completion_rate = percentage(len(done), len(tasks))

    return ProjectHealthSummary(
        health=classify_health(overdue=overdue, nearing_due=nearing_due, completion_rate=completion_rate),
        completion_rate=int(round_half_up(completion_rate, 0)),
        overdue_tasks=overdue,
        nearing_due_tasks=nearing_due,
        average_cycle_time_days=round_half_up(mean(elapsed_days(t.created_at, t.updated_at) for t in done), 1),
    )


def evaluate_health(tasks: Sequence[TaskRecord], *, today: Optional[datetime] = None) -> ProjectHealth:
    return summarize_health(tasks, today=today).health
