"""Login, token and user administration endpoints."""
from jose import jwt

from capplan.auth.tokens import decode_token
from capplan.config import get_settings
from conftest import ADMIN_EMAIL, login


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_login_returns_token_user_and_permissions(client):
    response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "admin123"})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["role"] == "Admin"
    assert body["permissions"]["view_settings"] is True
    assert body["permissions"]["landing_view"] == "dashboard"


def test_login_rejects_wrong_password_and_unknown_email(client):
    assert client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"}).status_code == 401
    assert client.post("/auth/login", json={"email": "ghost@company.com", "password": "admin123"}).status_code == 401


def test_login_email_is_case_insensitive(client):
    response = client.post("/auth/login", json={"email": "Admin@Company.com", "password": "admin123"})
    assert response.status_code == 200


def test_invalid_token_is_rejected(client):
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_me(client, admin_headers):
    body = client.get("/auth/me", headers=admin_headers).json()
    assert body["email"] == ADMIN_EMAIL
    assert body["name"] == "Admin User"


def test_user_without_password_cannot_log_in(client, admin_headers):
    response = client.post(
        "/users",
        json={"name": "Manager Only", "role": "Project Manager", "email": "nopass@company.com"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert client.post("/auth/login", json={"email": "nopass@company.com", "password": ""}).status_code == 401


def test_user_update_keeps_password_when_blank(client, admin_headers):
    created = client.post(
        "/users",
        json={"name": "Dana", "role": "Team Mate", "email": "dana@company.com", "password": "first-pass"},
        headers=admin_headers,
    ).json()
    response = client.put(
        f"/users/{created['id']}",
        json={"name": "Dana R.", "role": "Project Manager", "email": "dana@company.com", "password": ""},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["role"] == "Project Manager"

    headers = login(client, "dana@company.com", "first-pass")
    assert client.get("/auth/permissions", headers=headers).json()["edit_planner"] is True


def test_duplicate_email_conflicts(client, admin_headers):
    response = client.post(
        "/users",
        json={"name": "Copy", "role": "Team Mate", "email": ADMIN_EMAIL, "password": "x"},
        headers=admin_headers,
    )
    assert response.status_code == 409


def test_delete_user(client, admin_headers, make_user):
    make_user("Team Mate", "temp@company.com")
    users = client.get("/users", headers=admin_headers).json()
    temp = next(u for u in users if u["email"] == "temp@company.com")
    assert client.delete(f"/users/{temp['id']}", headers=admin_headers).status_code == 204
    assert client.delete(f"/users/{temp['id']}", headers=admin_headers).status_code == 404


def test_last_user_cannot_be_deleted(client, admin_headers):
    me = client.get("/auth/me", headers=admin_headers).json()
    response = client.delete(f"/users/{me['id']}", headers=admin_headers)
    assert response.status_code == 409


def test_insights_unavailable_without_api_key(client, seeded):
    response = client.post("/planner/insights", json={"week_start": "2024-03-04"}, headers=seeded)
    assert response.status_code == 200
    assert response.json()["status"] == "unavailable"


def test_login_token_carries_user_and_role(client):
    body = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "admin123"}).json()
    claims = decode_token(body["access_token"])
    assert claims["sub"] == body["user"]["id"]
    assert claims["role"] == "Admin"
    assert claims["exp"] > claims["iat"]


def test_token_without_subject_is_rejected(client):
    settings = get_settings()
    token = jwt.encode({"role": "Admin"}, settings.secret_key, algorithm=settings.algorithm)
    assert decode_token(token) is None
    assert client.get("/auth/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401
