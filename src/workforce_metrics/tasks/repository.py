from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Project, TaskRecord, TimeLogEntry


class TaskRepository(Protocol):
    def list_projects(self, *, organization_id: str, project_id: Optional[str] = None) -> Sequence[Project]:
        raise NotImplementedError

    def list_for_project(self, project_id: str) -> Sequence[TaskRecord]:
        """Every task of the project, whatever its status."""

        raise NotImplementedError

    def list_completed_for_assignee(
        self,
        *,
        organization_id: str,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> Sequence[TaskRecord]:
        raise NotImplementedError

    def list_time_logs(
        self,
        *,
        organization_id: str,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> Sequence[TimeLogEntry]:
        raise NotImplementedError
