from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ClockEvent
from .repository import AttendanceRepository

_SELECT = """
    SELECT
        ac.user_id, ac.org_id, ac.local_date, ac.clock_in_at, ac.clock_out_at, ac.source,
        u.full_name, u.email,
        om.role
    FROM attendance_checkins ac
    LEFT JOIN users u ON u.id = ac.user_id
    LEFT JOIN organization_members om ON om.organization_id = ac.org_id AND om.user_id = ac.user_id
"""


def _to_event(r: dict) -> ClockEvent:
    return ClockEvent(
        user_id=str(r["user_id"]),
        organization_id=str(r["org_id"]),
        local_date=r["local_date"],
        clock_in_at=r.get("clock_in_at"),
        clock_out_at=r.get("clock_out_at"),
        role=r.get("role") or "employee",
        full_name=r.get("full_name"),
        email=r.get("email") or "Unknown",
        source=r.get("source"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _query(self, where: str, params: tuple) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where} ORDER BY ac.local_date ASC, ac.clock_in_at ASC", params)
            return [_to_event(r) for r in fetchall(cur)]

    def list_for_date(self, *, organization_id: str, local_date: date) -> Sequence[ClockEvent]:
        return self._query("ac.org_id=%s AND ac.local_date=%s", (organization_id, local_date))

    def list_for_user(
        self,
        *,
        organization_id: str,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[ClockEvent]:
        return self._query(
            "ac.org_id=%s AND ac.user_id=%s AND ac.local_date BETWEEN %s AND %s",
            (organization_id, user_id, start_date, end_date),
        )
