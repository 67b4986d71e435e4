import pytest

from workforce_metrics.core.enums import Role
from workforce_metrics.core.exceptions import AuthorizationError
from workforce_metrics.members.roles import can_manage, can_view_reports, rank_of, require_report_access


def test_rank_order():
    assert [rank_of(r) for r in (Role.OWNER, Role.ADMIN, Role.SUPERVISOR, Role.EMPLOYEE)] == [4, 3, 2, 1]
    assert rank_of("admin") == 3


@pytest.mark.parametrize(
    "acting, target, allowed",
    [
        (Role.OWNER, Role.OWNER, True),
        (Role.ADMIN, Role.SUPERVISOR, True),
        (Role.ADMIN, Role.ADMIN, True),
        (Role.SUPERVISOR, Role.ADMIN, False),
        (Role.EMPLOYEE, Role.SUPERVISOR, False),
    ],
)
def test_can_manage_same_rank_or_below(acting, target, allowed):
    assert can_manage(acting, target) is allowed


def test_reports_need_supervisor_or_above():
    assert can_view_reports("supervisor")
    assert can_view_reports(Role.OWNER)
    assert not can_view_reports("employee")


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        rank_of("intern")


def test_report_access_guard():
    require_report_access("admin")
    for role in ("employee", "intern", None):
        with pytest.raises(AuthorizationError):
            require_report_access(role)
