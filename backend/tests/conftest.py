"""
Pytest configuration and fixtures.

Every API test gets a fresh in-memory SQLite database: the app lifespan
creates the schema and the first admin on startup and disposes the engine
on shutdown.
"""
import os
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_ROOT))

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ADMIN_EMAIL"] = "admin@company.com"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["OPENAI_API_KEY"] = ""

from fastapi.testclient import TestClient

from capplan.main import app

ADMIN_EMAIL = "admin@company.com"
ADMIN_PASSWORD = "admin123"


def login(client: TestClient, email: str, password: str) -> dict:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers(client):
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def make_user(client, admin_headers):
    """Create a user with the given role and return auth headers for it."""

    def _make(role: str, email: str, password: str = "secret123") -> dict:
        response = client.post(
            "/users",
            json={"name": role, "role": role, "email": email, "password": password},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return login(client, email, password)

    return _make


@pytest.fixture
def pm_headers(make_user):
    return make_user("Project Manager", "pm@company.com")


@pytest.fixture
def teammate_headers(make_user):
    return make_user("Team Mate", "dev@company.com")


@pytest.fixture
def seeded(client, admin_headers):
    """One team, two developers and two projects; Alice is assigned to both projects."""
    client.post("/teams", json={"id": "t1", "name": "Alpha Squad", "color": "indigo", "sort_order": 0}, headers=admin_headers)
    for dev_id, name, role in (("d1", "Alice Chen", "Frontend"), ("d2", "Bob Smith", "Backend")):
        response = client.post(
            "/developers",
            json={"id": dev_id, "name": name, "role": role, "level": "Senior", "team_id": "t1"},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
    for project_id, name in (("p1", "E-Commerce Platform"), ("p2", "Internal Dashboard")):
        response = client.post(
            "/projects",
            json={"id": project_id, "name": name, "color": "blue"},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
    for project_id in ("p1", "p2"):
        client.post("/assignments", json={"developer_id": "d1", "project_id": project_id}, headers=admin_headers)
    return admin_headers
