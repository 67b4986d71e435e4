"""Role hierarchy shared by every permission check.

owner > admin > supervisor > employee. Compare roles through these helpers
instead of inline rank tables.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.enums import Role
from ..core.exceptions import AuthorizationError

_RANKS = {
    Role.OWNER: 4,
    Role.ADMIN: 3,
    Role.SUPERVISOR: 2,
    Role.EMPLOYEE: 1,
}


def rank_of(role: Union[Role, str]) -> int:
    return _RANKS[Role(role)]


def can_manage(acting_role: Union[Role, str], target_role: Union[Role, str]) -> bool:
    """True when ``acting_role`` may invite, promote or demote to ``target_role``."""
    return rank_of(acting_role) >= rank_of(target_role)


def can_view_reports(role: Union[Role, str]) -> bool:
    return rank_of(role) >= rank_of(Role.SUPERVISOR)


def require_report_access(role: Optional[Union[Role, str]]) -> None:
    """Raise AuthorizationError unless ``role`` is supervisor or above."""
    try:
        allowed = role is not None and can_view_reports(role)
    except ValueError:
        allowed = False
    if not allowed:
        raise AuthorizationError("You do not have access to reports")
