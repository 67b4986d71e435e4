from __future__ import annotations

from datetime import tzinfo
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .model import WorkScheduleConfig
from .repository import WorkScheduleRepository


class MySQLWorkScheduleRepository(WorkScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, timezone: Optional[tzinfo] = None):
        self._conn_factory = conn_factory
        self._timezone = timezone

    def get_for_organization(self, organization_id: str) -> Optional[WorkScheduleConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_start_time, work_end_time, early_threshold_minutes, late_threshold_minutes
                FROM organizations
                WHERE id=%s
                """,
                (organization_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return WorkScheduleConfig.from_row(
                {
                    "work_start_time": normalize_mysql_time(r.get("work_start_time")),
                    "work_end_time": normalize_mysql_time(r.get("work_end_time")),
                    "early_threshold_minutes": r.get("early_threshold_minutes"),
                    "late_threshold_minutes": r.get("late_threshold_minutes"),
                },
                timezone=self._timezone,
            )
