from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Optional

from ..core.exceptions import QueryError
from .model import WorkScheduleConfig
from .repository import WorkScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    """Use case: resolve the work schedule an organization's reports run against."""

    def __init__(self, schedules: WorkScheduleRepository, *, timezone: Optional[tzinfo] = None):
        self._schedules = schedules
        self._timezone = timezone

    def get_effective(self, organization_id: str) -> WorkScheduleConfig:
        try:
            schedule = self._schedules.get_for_organization(organization_id)
        except QueryError:
            logger.warning("Work hours lookup failed for organization %s, using defaults", organization_id, exc_info=True)
            schedule = None

        if schedule is None:
            return WorkScheduleConfig(timezone=self._timezone)
        return schedule
