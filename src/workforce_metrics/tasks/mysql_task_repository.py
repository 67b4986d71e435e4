from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import TaskPriority, TaskStatus, TimeLogAction
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Project, TaskRecord, TimeLogEntry
from .repository import TaskRepository

_TASK_COLUMNS = "t.id, t.project_id, t.status, t.priority, t.created_at, t.updated_at, t.due_date, t.assignee_id"

logger = logging.getLogger(__name__)


def _status(value: str) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        logger.warning("Unrecognized task status %r; counted as neither done nor in progress", value)
        return TaskStatus.UNKNOWN


def _action(value: Optional[str]) -> TimeLogAction:
    if not value:
        return TimeLogAction.START
    try:
        return TimeLogAction(value)
    except ValueError:
        logger.warning("Unrecognized time log action %r", value)
        return TimeLogAction.UNKNOWN


def _to_task(r: dict) -> TaskRecord:
    return TaskRecord(
        id=str(r["id"]),
        project_id=str(r["project_id"]),
        status=_status(r["status"]),
        priority=TaskPriority(r.get("priority") or TaskPriority.MEDIUM.value),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        due_date=r.get("due_date"),
        assignee_id=str(r["assignee_id"]) if r.get("assignee_id") is not None else None,
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_projects(self, *, organization_id: str, project_id: Optional[str] = None) -> Sequence[Project]:
        clauses = ["organization_id=%s"]
        params: list[object] = [organization_id]
        if project_id is not None:
            clauses.append("id=%s")
            params.append(project_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id, name, organization_id FROM projects WHERE {where} ORDER BY name ASC", tuple(params))
            return [
                Project(id=str(r["id"]), name=r["name"], organization_id=str(r["organization_id"]))
                for r in fetchall(cur)
            ]

    def list_for_project(self, project_id: str) -> Sequence[TaskRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_TASK_COLUMNS} FROM tasks t WHERE t.project_id=%s", (project_id,))
            return [_to_task(r) for r in fetchall(cur)]

    def list_completed_for_assignee(
        self,
        *,
        organization_id: str,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> Sequence[TaskRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_TASK_COLUMNS}
                FROM tasks t
                JOIN projects p ON p.id = t.project_id
                WHERE p.organization_id=%s
                  AND t.assignee_id=%s
                  AND t.status=%s
                  AND t.updated_at BETWEEN %s AND %s
                """,
                (organization_id, user_id, TaskStatus.DONE.value, start, end),
            )
            return [_to_task(r) for r in fetchall(cur)]

    def list_time_logs(
        self,
        *,
        organization_id: str,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> Sequence[TimeLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT tl.task_id, tl.user_id, tl.duration, tl.timestamp, tl.action
                FROM time_logs tl
                JOIN tasks t ON t.id = tl.task_id
                JOIN projects p ON p.id = t.project_id
                WHERE p.organization_id=%s
                  AND tl.user_id=%s
                  AND tl.timestamp BETWEEN %s AND %s
                ORDER BY tl.timestamp ASC
                """,
                (organization_id, user_id, start, end),
            )
            return [
                TimeLogEntry(
                    task_id=str(r["task_id"]),
                    user_id=str(r["user_id"]),
                    timestamp=r["timestamp"],
                    action=_action(r.get("action")),
                    duration_seconds=int(r["duration"]) if r.get("duration") is not None else None,
                )
                for r in fetchall(cur)
            ]
