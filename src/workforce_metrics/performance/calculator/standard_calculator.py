from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ...common.datetime_utils import elapsed_days, now_local
from ...common.numbers import mean, percentage, round_half_up, safe_ratio
from ...members.model import Member
from ...tasks.model import Project, TaskRecord, TimeLogEntry
from ..model import DateRange, PerformanceMetrics, ProjectMetrics
from .base import MetricsCalculator

SECONDS_PER_HOUR = 3600


class StandardMetricsCalculator(MetricsCalculator):
    """Standard rules.

    - lead time: created -> completed (``updated_at`` of a done task)
    - cycle time: first time log of the task -> completed
    - focus ratio: logged hours / caller-supplied active hours, capped at 1
    """

    def compute_user_performance(
        self,
        tasks: Sequence[TaskRecord],
        time_logs: Sequence[TimeLogEntry],
        user_id: str,
        date_range: DateRange,
        *,
        active_hours: Optional[float] = None,
        member: Optional[Member] = None,
    ) -> PerformanceMetrics:
        completed = [
            t for t in tasks if t.is_done and t.assignee_id == user_id and date_range.contains(t.updated_at)
        ]
        logs = [log for log in time_logs if log.user_id == user_id and date_range.contains(log.timestamp)]

        first_log_by_task: dict[str, datetime] = {}
        for log in logs:
            first = first_log_by_task.get(log.task_id)
            if first is None or log.timestamp < first:
                first_log_by_task[log.task_id] = log.timestamp

        lead_times = [elapsed_days(t.created_at, t.updated_at) for t in completed]
        cycle_times = [
            elapsed_days(first_log_by_task[t.id], t.updated_at) for t in completed if t.id in first_log_by_task
        ]
        on_time = sum(1 for t in completed if t.completed_on_time())

        logged_hours = sum(log.duration_seconds or 0 for log in logs) / SECONDS_PER_HOUR
        focus_ratio = min(safe_ratio(logged_hours, active_hours or 0), 1.0)

        return PerformanceMetrics(
            user_id=user_id,
            user_name=(member.full_name if member else None) or "Unknown",
            user_email=member.email if member else "",
            user_role=member.role.value if member else None,
            tasks_completed=len(completed),
            average_lead_time_days=round_half_up(mean(lead_times), 1),
            average_cycle_time_days=round_half_up(mean(cycle_times), 1),
            on_time_delivery_rate=round_half_up(percentage(on_time, len(completed)), 1),
            total_logged_hours=round_half_up(logged_hours, 1),
            focus_ratio=round_half_up(focus_ratio, 2),
        )

    def compute_project_performance(
        self,
        tasks: Sequence[TaskRecord],
        date_range: DateRange,
        *,
        now: Optional[datetime] = None,
        project: Optional[Project] = None,
    ) -> ProjectMetrics:
        now = now or now_local()
        total = len(tasks)
        done = [t for t in tasks if t.is_done]
        overdue = sum(1 for t in tasks if t.is_overdue(now))
        nearing_due = sum(1 for t in tasks if t.is_nearing_due(now))
        created_in_range = sum(1 for t in tasks if date_range.contains(t.created_at))

        return ProjectMetrics(
            project_id=project.id if project else (tasks[0].project_id if tasks else ""),
            project_name=project.name if project else "",
            completion_rate=round_half_up(percentage(len(done), total), 1),
            overdue_tasks=overdue,
            nearing_due_tasks=nearing_due,
            average_cycle_time_days=round_half_up(mean(elapsed_days(t.created_at, t.updated_at) for t in done), 1),
            throughput=round_half_up(created_in_range / date_range.weeks, 1),
            wip=sum(1 for t in tasks if t.is_wip),
            sla_breach_rate=round_half_up(percentage(overdue, total), 1),
        )
