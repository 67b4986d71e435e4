from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ClockEvent


class AttendanceRepository(Protocol):
    def list_for_date(self, *, organization_id: str, local_date: date) -> Sequence[ClockEvent]:
        """Check-ins of one organization day, ordered by clock-in."""

        raise NotImplementedError

    def list_for_user(
        self,
        *,
        organization_id: str,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[ClockEvent]:
        raise NotImplementedError
