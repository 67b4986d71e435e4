from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Repository interface for organization members.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_for_organization(
        self,
        organization_id: str,
        *,
        user_ids: Optional[Sequence[str]] = None,
    ) -> Sequence[Member]:
        raise NotImplementedError
