from __future__ import annotations

from typing import Optional, Protocol

from .model import WorkScheduleConfig


class WorkScheduleRepository(Protocol):
    def get_for_organization(self, organization_id: str) -> Optional[WorkScheduleConfig]:
        """Return the organization's configured schedule, or None when not configured."""

        raise NotImplementedError
