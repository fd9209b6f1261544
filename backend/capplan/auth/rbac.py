"""Role-based access control."""
from capplan.models.enums import UserRole
from capplan.schemas.auth import Capabilities

PERMISSIONS: dict[UserRole | None, Capabilities] = {
    UserRole.ADMIN: Capabilities(
        view_dashboard=True,
        view_team=True,
        team_read_only=False,
        view_projects=True,
        view_risk_log=True,
        edit_planner=True,
        create_project=True,
        edit_project=True,
        delete_project=True,
        view_settings=True,
        landing_view="dashboard",
    ),
    UserRole.PROJECT_MANAGER: Capabilities(
        view_dashboard=True,
        view_team=True,
        team_read_only=True,
        view_projects=True,
        view_risk_log=True,
        edit_planner=True,
        create_project=False,
        edit_project=True,
        delete_project=False,
        view_settings=False,
        landing_view="dashboard",
    ),
    UserRole.TEAM_MATE: Capabilities(
        view_dashboard=False,
        view_team=False,
        team_read_only=True,
        view_projects=False,
        view_risk_log=False,
        edit_planner=False,
        create_project=False,
        edit_project=False,
        delete_project=False,
        view_settings=False,
        landing_view="planner",
    ),
    None: Capabilities(
        view_dashboard=False,
        view_team=False,
        team_read_only=True,
        view_projects=False,
        view_risk_log=False,
        edit_planner=False,
        create_project=False,
        edit_project=False,
        delete_project=False,
        view_settings=False,
        landing_view="dashboard",
    ),
}


def resolve_permissions(role: UserRole | str | None) -> Capabilities:
    """Capabilities of a role; unknown roles get nothing."""
    try:
        key = UserRole(role) if role is not None else None
    except ValueError:
        key = None
    return PERMISSIONS[key]


def can_edit_team(role: UserRole | str | None) -> bool:
    caps = resolve_permissions(role)
    return caps.view_team and not caps.team_read_only
