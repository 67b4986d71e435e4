from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceReportService
from .core.constants import DEFAULT_REPORT_MAX_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .notifications.notifier import FlashNotifier
from .performance.calculator.standard_calculator import StandardMetricsCalculator
from .performance.export import ReportExporter
from .performance.service import PerformanceReportService
from .schedules.mysql_schedule_repository import MySQLWorkScheduleRepository
from .schedules.service import ScheduleService
from .tasks.mysql_task_repository import MySQLTaskRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    members_repo: MySQLMemberRepository
    attendance_repo: MySQLAttendanceRepository
    schedules_repo: MySQLWorkScheduleRepository
    tasks_repo: MySQLTaskRepository

    notifier: FlashNotifier
    schedule_service: ScheduleService
    attendance_report_service: AttendanceReportService
    performance_report_service: PerformanceReportService
    report_exporter: ReportExporter


def build_container(
    *,
    db_config: dict,
    timezone: Optional[tzinfo] = None,
    report_max_workers: int = DEFAULT_REPORT_MAX_WORKERS,
    active_hours_per_day: Optional[float] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))

    members_repo = MySQLMemberRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    schedules_repo = MySQLWorkScheduleRepository(conn, timezone=timezone)
    tasks_repo = MySQLTaskRepository(conn)

    notifier = FlashNotifier()
    schedule_service = ScheduleService(schedules_repo, timezone=timezone)
    attendance_report_service = AttendanceReportService(attendance_repo, members_repo, schedule_service, notifier)
    performance_report_service = PerformanceReportService(
        members_repo,
        tasks_repo,
        notifier,
        calculator=StandardMetricsCalculator(),
        active_hours_per_day=active_hours_per_day,
        max_workers=report_max_workers,
    )

    return Container(
        conn=conn,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        tasks_repo=tasks_repo,
        notifier=notifier,
        schedule_service=schedule_service,
        attendance_report_service=attendance_report_service,
        performance_report_service=performance_report_service,
        report_exporter=ReportExporter(notifier),
    )
