from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Member:
    """Domain entity: a user's membership in one organization."""

    user_id: str
    organization_id: str
    role: Role
    email: str = ""
    full_name: Optional[str] = None

    def matches_search(self, query: str) -> bool:
        needle = query.lower()
        return needle in (self.full_name or "").lower() or needle in self.email.lower()
