from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class ClockEvent:
    """Domain entity: one attendance check-in row.

    ``clock_in_at`` None marks an absence placeholder, ``clock_out_at`` None an
    active shift. Display fields come from the member join.
    """

    user_id: str
    organization_id: str
    local_date: date
    clock_in_at: Optional[datetime]
    clock_out_at: Optional[datetime] = None
    role: Optional[str] = None
    full_name: Optional[str] = None
    email: str = ""
    source: Optional[str] = None

    @property
    def is_present(self) -> bool:
        return self.clock_in_at is not None

    @property
    def is_active(self) -> bool:
        return self.clock_in_at is not None and self.clock_out_at is None

    def matches_search(self, query: str) -> bool:
        needle = query.lower()
        return needle in (self.full_name or "").lower() or needle in self.email.lower()


@dataclass(frozen=True)
class AttendanceStats:
    """Aggregate over one record set (org, day, optional filters)."""

    total_present: int = 0
    early_arrivals: int = 0
    on_time: int = 0
    late: int = 0
    overtime: int = 0
    total_members: int = 0

    @property
    def absent(self) -> int:
        return self.total_members - self.total_present

    @property
    def attended(self) -> int:
        return self.early_arrivals + self.on_time

    @property
    def has_integrity_issue(self) -> bool:
        """Roster smaller than the present count: the caller passed a stale or unfiltered total."""
        return self.absent < 0

    def as_dict(self) -> dict:
        data = asdict(self)
        data["absent"] = self.absent
        data["attended"] = self.attended
        return data
