from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from ...members.model import Member
from ...tasks.model import Project, TaskRecord, TimeLogEntry
from ..model import DateRange, PerformanceMetrics, ProjectMetrics


class MetricsCalculator(ABC):
    """Calculator interface (Strategy Pattern for productivity metrics)."""

    @abstractmethod
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
        raise NotImplementedError

    @abstractmethod
    def compute_project_performance(
        self,
        tasks: Sequence[TaskRecord],
        date_range: DateRange,
        *,
        now: Optional[datetime] = None,
        project: Optional[Project] = None,
    ) -> ProjectMetrics:
        raise NotImplementedError
