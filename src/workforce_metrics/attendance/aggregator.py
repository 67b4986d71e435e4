from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import at_time_of_day
from ..common.validators import require_clock_order
from ..core.enums import ArrivalStatus
from ..core.exceptions import ValidationError
from ..members.model import Member
from ..schedules.model import WorkScheduleConfig
from .classifier import classify_arrival, has_overtime
from .model import AttendanceStats, ClockEvent

logger = logging.getLogger(__name__)

STATUS_ALL = "all"
STATUS_ABSENT = "absent"


def aggregate(
    records: Iterable[ClockEvent],
    total_members: int,
    schedule: WorkScheduleConfig,
    *,
    strict: bool = False,
) -> AttendanceStats:
    """Fold clock events into one AttendanceStats.

    Absence placeholders (no clock-in) are skipped; absence is derived from
    ``total_members``, which must be the roster size for the same scope as
    ``records``.
    """

    buckets = {ArrivalStatus.EARLY: 0, ArrivalStatus.ON_TIME: 0, ArrivalStatus.LATE: 0}
    overtime = 0

    for record in records:
        if strict:
            require_clock_order(record)
        if not record.is_present:
            continue

        buckets[classify_arrival(record.clock_in_at, schedule)] += 1
        if has_overtime(record.clock_in_at, record.clock_out_at, schedule):
            overtime += 1

    stats = AttendanceStats(
        total_present=sum(buckets.values()),
        early_arrivals=buckets[ArrivalStatus.EARLY],
        on_time=buckets[ArrivalStatus.ON_TIME],
        late=buckets[ArrivalStatus.LATE],
        overtime=overtime,
        total_members=int(total_members),
    )
    if stats.has_integrity_issue:
        logger.warning(
            "Roster of %s is smaller than %s present records; absent count is negative",
            stats.total_members,
            stats.total_present,
        )
    return stats


def filter_records(records: Iterable[ClockEvent], predicate: Callable[[ClockEvent], bool]) -> list[ClockEvent]:
    return [r for r in records if predicate(r)]


@dataclass(frozen=True)
class AttendanceFilter:
    """Role / search / arrival-status filters of the attendance report.

    Filters apply to the records and to the member roster alike, so the
    filtered view is aggregated against the filtered roster size.
    """

    role: Optional[str] = None
    search: Optional[str] = None
    status: Optional[str] = None

    def __post_init__(self) -> None:
        allowed = {STATUS_ALL, STATUS_ABSENT, *(s.value for s in ArrivalStatus)}
        if self.status and self.status not in allowed:
            raise ValidationError(f"Unknown status filter: {self.status}")

    def apply_to_members(self, members: Sequence[Member]) -> list[Member]:
        out = list(members)
        if self.role and self.role != STATUS_ALL:
            out = [m for m in out if m.role.value == self.role]
        if self.search:
            out = [m for m in out if m.matches_search(self.search)]
        return out

    def apply_to_records(self, records: Sequence[ClockEvent], schedule: WorkScheduleConfig) -> list[ClockEvent]:
        out = list(records)
        if self.search:
            out = [r for r in out if r.matches_search(self.search)]

        status = self.status
        if status and status != STATUS_ALL:
            if status == STATUS_ABSENT:
                # Absent members have no check-in rows to show.
                out = []
            else:
                wanted = ArrivalStatus(status)
                out = [r for r in out if r.clock_in_at is not None and classify_arrival(r.clock_in_at, schedule) == wanted]

        if self.role and self.role != STATUS_ALL:
            out = [r for r in out if (r.role or "employee") == self.role]
        return out

    def apply(
        self,
        records: Sequence[ClockEvent],
        members: Sequence[Member],
        schedule: WorkScheduleConfig,
    ) -> tuple[list[ClockEvent], int]:
        """Filtered records plus the size of the roster under the same filter."""
        return self.apply_to_records(records, schedule), len(self.apply_to_members(members))


def worked_duration(event: ClockEvent) -> Optional[timedelta]:
    if event.clock_in_at is None or event.clock_out_at is None:
        return None
    return event.clock_out_at - event.clock_in_at


def list_absent_dates(
    records: Iterable[ClockEvent],
    *,
    start: date,
    end: date,
    now: datetime,
    schedule: WorkScheduleConfig,
) -> list[date]:
    """Days in [start, end] without a record, newest first.

    Only past days count, plus today once work end has passed.
    """

    recorded = {r.local_date for r in records if r.is_present}
    today = now.date()
    after_work_end = now >= at_time_of_day(now, schedule.work_end_time)

    out: list[date] = []
    day = end
    while day >= start:
        if day not in recorded and (day < today or (day == today and after_work_end)):
            out.append(day)
        day -= timedelta(days=1)
    return out
