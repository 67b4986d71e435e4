from datetime import date, datetime

from workforce_metrics.core.enums import Role, TaskStatus, TimeLogAction
from workforce_metrics.members.model import Member
from workforce_metrics.performance.model import DateRange
from workforce_metrics.performance.service import PerformanceReportService
from workforce_metrics.tasks.mysql_task_repository import MySQLTaskRepository

JANUARY = DateRange.from_dates(date(2025, 1, 1), date(2025, 1, 31))


class RowsCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((sql, params))

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class RowsConnection:
    def __init__(self, rows):
        self.cursor_obj = RowsCursor(rows)

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class RowsFactory:
    """Hands out a fresh connection per query, each answering with the next batch of rows."""

    def __init__(self, *batches):
        self._batches = list(batches)

    def connect(self):
        return RowsConnection(self._batches.pop(0) if self._batches else [])


def _task_row(task_id, status):
    return {
        "id": task_id,
        "project_id": 7,
        "status": status,
        "priority": None,
        "created_at": datetime(2025, 1, 2),
        "updated_at": datetime(2025, 1, 4),
        "due_date": None,
        "assignee_id": 1,
    }


def _log_row(action, duration=600):
    return {"task_id": 3, "user_id": 1, "duration": duration, "timestamp": datetime(2025, 1, 3, 9), "action": action}


def test_resume_logs_are_read():
    repo = MySQLTaskRepository(RowsFactory([_log_row("start"), _log_row("resume"), _log_row(None)]))

    logs = repo.list_time_logs(organization_id="org-1", user_id="1", start=JANUARY.start, end=JANUARY.end)

    assert [log.action for log in logs] == [TimeLogAction.START, TimeLogAction.RESUME, TimeLogAction.START]
    assert logs[1].duration_seconds == 600
    assert logs[1].task_id == "3"


def test_unrecognized_log_action_is_kept():
    repo = MySQLTaskRepository(RowsFactory([_log_row("rewind")]))

    logs = repo.list_time_logs(organization_id="org-1", user_id="1", start=JANUARY.start, end=JANUARY.end)

    assert logs[0].action == TimeLogAction.UNKNOWN


def test_submitted_and_unrecognized_statuses_are_neither_done_nor_wip():
    repo = MySQLTaskRepository(RowsFactory([_task_row(1, "submitted"), _task_row(2, "archived"), _task_row(3, "done")]))

    tasks = repo.list_for_project("7")

    assert [t.status for t in tasks] == [TaskStatus.SUBMITTED, TaskStatus.UNKNOWN, TaskStatus.DONE]
    assert [(t.is_done, t.is_wip) for t in tasks] == [(False, False), (False, False), (True, False)]
    assert tasks[0].project_id == "7"


class OneMember:
    def list_for_organization(self, organization_id, *, user_ids=None):
        return [Member("1", organization_id, Role.EMPLOYEE, "alice@example.com", "Alice")]


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def notify(self, notification) -> None:
        self.sent.append(notification)


def test_user_performance_survives_resume_logs():
    # completed tasks first, then time logs
    factory = RowsFactory([_task_row(3, "done")], [_log_row("start", 1800), _log_row("resume", 1800)])
    notifier = RecordingNotifier()
    service = PerformanceReportService(OneMember(), MySQLTaskRepository(factory), notifier)

    metrics = service.get_user_performance("org-1", JANUARY, user_id="1")

    assert notifier.sent == []
    assert metrics[0].tasks_completed == 1
    assert metrics[0].total_logged_hours == 1
