"""Role to capability lookup and its enforcement on the API."""
import pytest

from capplan.auth.rbac import can_edit_team, resolve_permissions
from capplan.models.enums import UserRole


def test_admin_can_do_everything():
    caps = resolve_permissions(UserRole.ADMIN)
    assert caps.view_dashboard and caps.view_settings and caps.edit_planner
    assert caps.create_project and caps.edit_project and caps.delete_project
    assert not caps.team_read_only
    assert caps.landing_view == "dashboard"


def test_project_manager_edits_but_does_not_create_or_delete():
    caps = resolve_permissions("Project Manager")
    assert caps.view_dashboard and caps.view_team and caps.view_risk_log and caps.edit_planner
    assert caps.edit_project
    assert not caps.create_project and not caps.delete_project
    assert caps.team_read_only
    assert not caps.view_settings


def test_team_mate_lands_on_planner_read_only():
    caps = resolve_permissions(UserRole.TEAM_MATE)
    assert caps.landing_view == "planner"
    assert not any(
        [caps.view_dashboard, caps.view_team, caps.view_projects, caps.view_risk_log, caps.edit_planner, caps.view_settings]
    )


@pytest.mark.parametrize("role", [None, "Intern"])
def test_unknown_or_missing_role_gets_nothing(role):
    caps = resolve_permissions(role)
    assert not caps.view_dashboard and not caps.edit_planner and not caps.create_project


def test_only_admin_edits_team():
    assert can_edit_team(UserRole.ADMIN)
    assert not can_edit_team(UserRole.PROJECT_MANAGER)
    assert not can_edit_team(UserRole.TEAM_MATE)


def test_unauthenticated_requests_are_rejected(client):
    assert client.get("/developers").status_code == 401
    assert client.get("/dashboard").status_code == 401


def test_team_mate_cannot_mutate_planner(client, seeded, teammate_headers):
    response = client.put(
        "/allocations",
        json={"developer_id": "d1", "project_id": "p1", "date": "2024-03-04", "hours": 4},
        headers=teammate_headers,
    )
    assert response.status_code == 403
    assert client.get("/dashboard", headers=teammate_headers).status_code == 403
    # The planner grid itself stays readable
    assert client.get("/planner", headers=teammate_headers).status_code == 200


def test_project_manager_permissions_on_api(client, seeded, pm_headers):
    assert client.post("/projects", json={"name": "New", "color": "red"}, headers=pm_headers).status_code == 403
    assert client.delete("/projects/p1", headers=pm_headers).status_code == 403
    assert client.put("/projects/p1", json={"name": "Renamed", "color": "red"}, headers=pm_headers).status_code == 200
    assert client.post("/teams", json={"name": "X", "color": "red"}, headers=pm_headers).status_code == 403
    assert client.post("/users", json={"name": "X", "role": "Team Mate"}, headers=pm_headers).status_code == 403
    assert client.get("/risk-logs", headers=pm_headers).status_code == 200


def test_permissions_endpoint(client, teammate_headers):
    body = client.get("/auth/permissions", headers=teammate_headers).json()
    assert body["landing_view"] == "planner"
    assert body["edit_planner"] is False
