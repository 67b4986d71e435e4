from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Organization membership role."""

    OWNER = "owner"
    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    EMPLOYEE = "employee"


class ArrivalStatus(str, Enum):
    """Arrival bucket derived from a clock-in and the work schedule."""

    EARLY = "early"
    ON_TIME = "on-time"
    LATE = "late"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    REVIEW = "review"
    BLOCKED = "blocked"
    SUBMITTED = "submitted"
    DONE = "done"
    OVERDUE = "overdue"
    UNKNOWN = "unknown"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TimeLogAction(str, Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    COMPLETE = "complete"
    UNKNOWN = "unknown"


class ProjectHealth(str, Enum):
    """Traffic-light signal for a project's task set."""

    GOOD = "Good"
    AT_RISK = "At Risk"
    BLOCKED = "Blocked"


class Severity(str, Enum):
    """Notification severity; values double as Flask flash categories."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
