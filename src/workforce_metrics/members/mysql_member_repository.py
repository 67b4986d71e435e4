from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import Member
from .repository import MemberRepository


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_organization(
        self,
        organization_id: str,
        *,
        user_ids: Optional[Sequence[str]] = None,
    ) -> Sequence[Member]:
        clauses = ["om.organization_id=%s"]
        params: list[object] = [organization_id]

        if user_ids is not None:
            if not user_ids:
                return []
            clauses.append(f"om.user_id IN ({in_clause(user_ids)})")
            params.extend(user_ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT om.user_id, om.organization_id, om.role, u.email, u.full_name
                FROM organization_members om
                LEFT JOIN users u ON u.id = om.user_id
                WHERE {where}
                ORDER BY u.full_name ASC, om.user_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                Member(
                    user_id=str(r["user_id"]),
                    organization_id=str(r["organization_id"]),
                    role=Role(r["role"]),
                    email=r.get("email") or "Unknown",
                    full_name=r.get("full_name"),
                )
                for r in rows
            ]
