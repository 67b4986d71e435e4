from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.enums import ProjectHealth


@dataclass(frozen=True)
class DateRange:
    """Inclusive reporting window."""

    start: datetime
    end: datetime

    @classmethod
    def from_dates(cls, start: date, end: date) -> "DateRange":
        return cls(start=datetime.combine(start, time.min), end=datetime.combine(end, time.max))

    def contains(self, value: datetime) -> bool:
        return self.start <= value <= self.end

    @property
    def days(self) -> float:
        return (self.end - self.start) / timedelta(days=1)

    @property
    def weeks(self) -> float:
        """Week count for rates; never below one so short ranges are not inflated."""
        return max(1.0, self.days / 7)


@dataclass(frozen=True)
class PerformanceMetrics:
    user_id: str
    tasks_completed: int
    average_lead_time_days: float
    average_cycle_time_days: float
    on_time_delivery_rate: float
    total_logged_hours: float
    focus_ratio: float
    user_name: str = "Unknown"
    user_email: str = ""
    user_role: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProjectMetrics:
    project_id: str
    completion_rate: float
    overdue_tasks: int
    nearing_due_tasks: int
    average_cycle_time_days: float
    throughput: float
    wip: int
    sla_breach_rate: float
    project_name: str = ""

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProjectHealthSummary:
    health: ProjectHealth
    completion_rate: int
    overdue_tasks: int
    nearing_due_tasks: int
    average_cycle_time_days: float

    def as_dict(self) -> dict:
        data = asdict(self)
        data["health"] = self.health.value
        return data


@dataclass(frozen=True)
class ReportFilters:
    date_range: DateRange
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    team_id: Optional[str] = None


@dataclass(frozen=True)
class PerformanceReport:
    user_metrics: list[PerformanceMetrics] = field(default_factory=list)
    project_metrics: list[ProjectMetrics] = field(default_factory=list)
    team_metrics: list[PerformanceMetrics] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "user_metrics": [m.as_dict() for m in self.user_metrics],
            "project_metrics": [m.as_dict() for m in self.project_metrics],
            "team_metrics": [m.as_dict() for m in self.team_metrics],
        }
