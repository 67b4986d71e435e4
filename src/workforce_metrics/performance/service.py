from __future__ import annotations

import logging
import math
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

from ..core.constants import DEFAULT_REPORT_MAX_WORKERS
from ..core.enums import ProjectHealth, Severity
from ..core.exceptions import QueryError
from ..members.repository import MemberRepository
from ..notifications.model import Notification
from ..notifications.notifier import Notifier
from ..tasks.repository import TaskRepository
from .calculator.base import MetricsCalculator
from .calculator.standard_calculator import StandardMetricsCalculator
from .health import summarize_health
from .model import (
    DateRange,
    PerformanceMetrics,
    PerformanceReport,
    ProjectHealthSummary,
    ProjectMetrics,
    ReportFilters,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PerformanceReportService:
    """Use case: per-user, per-project and team productivity reports.

    Read-only. Each section degrades to an empty list when the store fails;
    the failure is logged and surfaced through the notifier.
    """

    def __init__(
        self,
        members: MemberRepository,
        tasks: TaskRepository,
        notifier: Notifier,
        *,
        calculator: Optional[MetricsCalculator] = None,
        active_hours_per_day: Optional[float] = None,
        max_workers: int = DEFAULT_REPORT_MAX_WORKERS,
    ):
        self._members = members
        self._tasks = tasks
        self._notifier = notifier
        self._calculator = calculator or StandardMetricsCalculator()
        self._active_hours_per_day = active_hours_per_day
        self._max_workers = max(1, int(max_workers))

    def _active_hours(self, date_range: DateRange) -> Optional[float]:
        if not self._active_hours_per_day:
            return None
        return self._active_hours_per_day * max(1, math.ceil(date_range.days))

    def _user_metrics(
        self,
        organization_id: str,
        date_range: DateRange,
        user_id: Optional[str] = None,
    ) -> list[PerformanceMetrics]:
        members = self._members.list_for_organization(organization_id, user_ids=[user_id] if user_id else None)
        active_hours = self._active_hours(date_range)

        metrics: list[PerformanceMetrics] = []
        for member in members:
            completed = self._tasks.list_completed_for_assignee(
                organization_id=organization_id,
                user_id=member.user_id,
                start=date_range.start,
                end=date_range.end,
            )
            logs = self._tasks.list_time_logs(
                organization_id=organization_id,
                user_id=member.user_id,
                start=date_range.start,
                end=date_range.end,
            )
            metrics.append(
                self._calculator.compute_user_performance(
                    completed,
                    logs,
                    member.user_id,
                    date_range,
                    active_hours=active_hours,
                    member=member,
                )
            )
        return metrics

    def _project_metrics(
        self,
        organization_id: str,
        date_range: DateRange,
        project_id: Optional[str] = None,
    ) -> list[ProjectMetrics]:
        projects = self._tasks.list_projects(organization_id=organization_id, project_id=project_id)
        return [
            self._calculator.compute_project_performance(
                self._tasks.list_for_project(project.id),
                date_range,
                project=project,
            )
            for project in projects
        ]

    def _fail(self, description: str, error: BaseException) -> list:
        logger.error("%s: %s", description, error, exc_info=error)
        self._notifier.notify(Notification("Error", description, Severity.DANGER))
        return []

    def _guard(self, description: str, compute: Callable[[], list[T]]) -> list[T]:
        try:
            return compute()
        except Exception as e:
            return self._fail(description, e)

    def get_user_performance(
        self,
        organization_id: str,
        date_range: DateRange,
        user_id: Optional[str] = None,
    ) -> list[PerformanceMetrics]:
        return self._guard(
            "Failed to get user performance data",
            lambda: self._user_metrics(organization_id, date_range, user_id),
        )

    def get_project_performance(
        self,
        organization_id: str,
        date_range: DateRange,
        project_id: Optional[str] = None,
    ) -> list[ProjectMetrics]:
        return self._guard(
            "Failed to get project performance data",
            lambda: self._project_metrics(organization_id, date_range, project_id),
        )

    def get_team_performance(self, organization_id: str, date_range: DateRange) -> list[PerformanceMetrics]:
        return self._guard(
            "Failed to get team performance data",
            lambda: self._user_metrics(organization_id, date_range),
        )

    def get_project_health(self, project_id: str) -> ProjectHealthSummary:
        """Health of one project; a store failure yields a zeroed "Good" summary."""
        try:
            tasks = self._tasks.list_for_project(project_id)
        except QueryError as e:
            logger.error("Error calculating project health for %s: %s", project_id, e)
            self._notifier.notify(Notification("Error", "Failed to get project health", Severity.DANGER))
            return ProjectHealthSummary(
                health=ProjectHealth.GOOD,
                completion_rate=0,
                overdue_tasks=0,
                nearing_due_tasks=0,
                average_cycle_time_days=0.0,
            )
        return summarize_health(tasks)

    def _collect(self, future: Future, description: str) -> list:
        # Notifications go out from the calling thread; Flask's flash needs the request context.
        try:
            return future.result()
        except Exception as e:
            return self._fail(description, e)

    def generate_report(self, organization_id: str, filters: ReportFilters) -> PerformanceReport:
        """Compute the three sections concurrently and join them.

        Sections share no state; one failing leaves the others intact.
        """

        date_range = filters.date_range
        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="report") as pool:
            users = pool.submit(self._user_metrics, organization_id, date_range, filters.user_id)
            projects = pool.submit(self._project_metrics, organization_id, date_range, filters.project_id)
            team = pool.submit(self._user_metrics, organization_id, date_range)

            return PerformanceReport(
                user_metrics=self._collect(users, "Failed to get user performance data"),
                project_metrics=self._collect(projects, "Failed to get project performance data"),
                team_metrics=self._collect(team, "Failed to get team performance data"),
            )
