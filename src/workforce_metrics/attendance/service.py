from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local, to_local
from ..core.constants import DEFAULT_ABSENCE_LOOKBACK_DAYS
from ..core.enums import Severity
from ..core.exceptions import QueryError
from ..members.repository import MemberRepository
from ..notifications.model import Notification
from ..notifications.notifier import Notifier
from ..schedules.model import WorkScheduleConfig
from ..schedules.service import ScheduleService
from .aggregator import AttendanceFilter, aggregate, list_absent_dates, worked_duration
from .classifier import AttendanceClassifier
from .model import AttendanceStats, ClockEvent
from .repository import AttendanceRepository
from .strategies.base import ArrivalDecision

logger = logging.getLogger(__name__)

STILL_WORKING = "Still working"


@dataclass(frozen=True)
class AttendanceRow:
    event: ClockEvent
    decision: ArrivalDecision
    overtime: bool

    def as_dict(self) -> dict:
        return {
            "user_id": self.event.user_id,
            "full_name": self.event.full_name,
            "email": self.event.email,
            "role": self.event.role or "employee",
            "local_date": self.event.local_date.isoformat(),
            "clock_in_at": self.event.clock_in_at.isoformat() if self.event.clock_in_at else None,
            "clock_out_at": self.event.clock_out_at.isoformat() if self.event.clock_out_at else None,
            "status": self.decision.status.value,
            "note": self.decision.note,
            "overtime": self.overtime,
        }


@dataclass(frozen=True)
class AttendanceReport:
    local_date: date
    schedule: WorkScheduleConfig
    rows: list[AttendanceRow] = field(default_factory=list)
    stats: AttendanceStats = field(default_factory=AttendanceStats)
    filtered_stats: AttendanceStats = field(default_factory=AttendanceStats)

    def as_dict(self) -> dict:
        return {
            "date": self.local_date.isoformat(),
            "rows": [r.as_dict() for r in self.rows],
            "stats": self.stats.as_dict(),
            "filtered_stats": self.filtered_stats.as_dict(),
        }


@dataclass(frozen=True)
class MemberHistory:
    user_id: str
    rows: list[AttendanceRow] = field(default_factory=list)
    absent_dates: list[date] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "rows": [r.as_dict() for r in self.rows],
            "absent_dates": [d.isoformat() for d in self.absent_dates],
        }


def format_worked(duration: Optional[timedelta]) -> str:
    """``Xh Ym`` worked time, or "Still working" for an open shift."""
    if duration is None:
        return STILL_WORKING
    total_minutes = round(duration / timedelta(minutes=1))
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


class AttendanceReportService:
    """Use case: daily attendance report and per-member history (read-only)."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        schedules: ScheduleService,
        notifier: Notifier,
    ):
        self._attendance = attendance
        self._members = members
        self._schedules = schedules
        self._notifier = notifier

    def _rows(self, records, classifier: AttendanceClassifier) -> list[AttendanceRow]:
        return [
            AttendanceRow(
                event=r,
                decision=classifier.decide(r.clock_in_at),
                overtime=classifier.has_overtime(r.clock_in_at, r.clock_out_at),
            )
            for r in records
            if r.is_present
        ]

    def build_daily_report(
        self,
        organization_id: str,
        local_date: date,
        *,
        filters: Optional[AttendanceFilter] = None,
    ) -> AttendanceReport:
        schedule = self._schedules.get_effective(organization_id)
        filters = filters or AttendanceFilter()

        try:
            members = self._members.list_for_organization(organization_id)
            records = self._attendance.list_for_date(organization_id=organization_id, local_date=local_date)
        except QueryError as e:
            logger.error("Error fetching attendance for %s on %s: %s", organization_id, local_date, e)
            self._notifier.notify(Notification("Error", "Failed to fetch attendance data", Severity.DANGER))
            return AttendanceReport(local_date=local_date, schedule=schedule)

        filtered, filtered_total = filters.apply(records, members, schedule)
        classifier = AttendanceClassifier(schedule)

        return AttendanceReport(
            local_date=local_date,
            schedule=schedule,
            rows=self._rows(filtered, classifier),
            stats=aggregate(records, len(members), schedule),
            filtered_stats=aggregate(filtered, filtered_total, schedule),
        )

    def build_member_history(
        self,
        organization_id: str,
        user_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> MemberHistory:
        """Member records plus absent days, by default over the last 30 days ending today."""
        schedule = self._schedules.get_effective(organization_id)
        now = to_local(now, schedule.timezone) if now else now_local(schedule.timezone)
        end = end or now.date()
        start = start or end - timedelta(days=DEFAULT_ABSENCE_LOOKBACK_DAYS - 1)

        records = self._attendance.list_for_user(
            organization_id=organization_id,
            user_id=user_id,
            start_date=start,
            end_date=end,
        )
        return MemberHistory(
            user_id=user_id,
            rows=self._rows(records, AttendanceClassifier(schedule)),
            absent_dates=list_absent_dates(records, start=start, end=end, now=now, schedule=schedule),
        )

    def export_rows(self, report: AttendanceReport) -> list[dict]:
        tz = report.schedule.timezone
        out = []
        for row in report.rows:
            event = row.event
            out.append(
                {
                    "Name": event.full_name or "N/A",
                    "Email": event.email,
                    "Role": (event.role or "employee").capitalize(),
                    "Clock In": to_local(event.clock_in_at, tz).strftime("%H:%M:%S"),
                    "Clock Out": STILL_WORKING if event.is_active else to_local(event.clock_out_at, tz).strftime("%H:%M:%S"),
                    "Status": row.decision.status.value,
                    "Hours Worked": format_worked(worked_duration(event)),
                    "Overtime": "Yes" if row.overtime else "No",
                }
            )
        return out
