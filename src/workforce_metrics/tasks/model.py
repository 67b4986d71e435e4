from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import NEARING_DUE_DAYS
from ..core.enums import TaskPriority, TaskStatus, TimeLogAction

WIP_STATUSES = frozenset({TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.IN_REVIEW})


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    organization_id: str


@dataclass(frozen=True)
class TaskRecord:
    """Domain entity: a project task as read for metrics.

    ``updated_at`` of a done task is its completion time.
    """

    id: str
    project_id: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    assignee_id: Optional[str] = None

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE

    @property
    def is_wip(self) -> bool:
        return self.status in WIP_STATUSES

    def is_overdue(self, as_of: datetime) -> bool:
        if self.due_date is None or self.is_done:
            return False
        return self.due_date < as_of

    def is_nearing_due(self, as_of: datetime, days: int = NEARING_DUE_DAYS) -> bool:
        if self.due_date is None or self.is_done:
            return False
        return as_of <= self.due_date <= as_of + timedelta(days=days)

    def completed_on_time(self) -> bool:
        """Done tasks without a due date always count as on time."""
        if self.due_date is None:
            return True
        return self.updated_at <= self.due_date


@dataclass(frozen=True)
class TimeLogEntry:
    """Append-only time log row."""

    task_id: str
    user_id: str
    timestamp: datetime
    action: TimeLogAction = TimeLogAction.START
    duration_seconds: Optional[int] = None
