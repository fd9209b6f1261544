"""Project, risk log, team and developer endpoints."""


def test_project_subprojects_define_deadline(client, admin_headers):
    response = client.post(
        "/projects",
        json={
            "name": "Shop Relaunch",
            "color": "blue",
            "stack": "Shopify",
            "subprojects": [
                {"name": "Phase 1", "deadline": "2024-04-01"},
                {"name": "   ", "deadline": "2024-01-01"},
                {"name": "Phase 2", "deadline": "2024-06-01"},
            ],
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert [s["name"] for s in body["subprojects"]] == ["Phase 1", "Phase 2"]
    assert body["deadline"] == "2024-04-01"
    assert body["last_status_update"] is not None

    updated = client.put(
        f"/projects/{body['id']}",
        json={"name": "Shop Relaunch", "color": "blue", "subprojects": [{"name": "Go live", "deadline": "2024-05-15"}]},
        headers=admin_headers,
    ).json()
    assert [s["name"] for s in updated["subprojects"]] == ["Go live"]
    assert updated["deadline"] == "2024-05-15"


def test_non_green_risk_requires_description(client, admin_headers):
    response = client.post(
        "/projects",
        json={"name": "Risky", "color": "red", "risk_level": "Yellow", "risk_description": "  "},
        headers=admin_headers,
    )
    assert response.status_code == 422


def test_red_risk_save_appends_one_log_and_counts(client, seeded):
    me = client.get("/auth/me", headers=seeded).json()
    response = client.put(
        "/projects/p1",
        json={"name": "E-Commerce Platform", "color": "blue", "risk_level": "Red", "risk_description": "blocked on vendor"},
        headers=seeded,
    )
    assert response.status_code == 200

    logs = client.get("/risk-logs", params={"project_id": "p1"}, headers=seeded).json()
    assert len(logs) == 1
    assert logs[0]["risk_level"] == "Red"
    assert logs[0]["risk_description"] == "blocked on vendor"
    assert logs[0]["updated_by"] == me["id"]

    stats = client.get("/dashboard", headers=seeded).json()["projects"]
    assert stats["risk_counts"]["red"] == 1
    assert [p["id"] for p in stats["at_risk_projects"]] == ["p1"]


def test_green_save_records_nothing_and_resave_records_again(client, seeded):
    green = {"name": "Internal Dashboard", "color": "green"}
    client.put("/projects/p2", json=green, headers=seeded)
    assert client.get("/risk-logs", headers=seeded).json() == []

    yellow = {**green, "risk_level": "Yellow", "risk_description": "scope creep"}
    client.put("/projects/p2", json=yellow, headers=seeded)
    client.put("/projects/p2", json=yellow, headers=seeded)
    assert len(client.get("/risk-logs", params={"project_id": "p2"}, headers=seeded).json()) == 2


def test_manual_risk_log_entry(client, seeded):
    response = client.post(
        "/risk-logs",
        json={"project_id": "p1", "risk_level": "Yellow", "risk_description": "waiting on QA"},
        headers=seeded,
    )
    assert response.status_code == 201
    assert client.get("/risk-logs", headers=seeded).json()[0]["risk_description"] == "waiting on QA"


def test_delete_project(client, seeded):
    assert client.delete("/projects/p2", headers=seeded).status_code == 204
    assert [p["id"] for p in client.get("/projects", headers=seeded).json()] == ["p1"]
    # Deleting again is a no-op
    assert client.delete("/projects/p2", headers=seeded).status_code == 204


def test_deleting_team_unassigns_developers(client, seeded):
    assert client.delete("/teams/t1", headers=seeded).status_code == 204
    developers = client.get("/developers", headers=seeded).json()
    assert {d["team_id"] for d in developers} == {None}

    grid = client.get("/planner", headers=seeded).json()
    assert [g["team_name"] for g in grid["groups"]] == ["Unassigned"]


def test_deleting_missing_team_is_not_found(client, admin_headers):
    response = client.delete("/teams/nope", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Team not found"


def test_developer_upsert_and_delete(client, seeded):
    response = client.put(
        "/developers/d2",
        json={"name": "Bob Smith", "role": "Backend", "level": "Lead", "type": "Freelancer", "capacity": 6},
        headers=seeded,
    )
    assert response.status_code == 200
    assert response.json()["type"] == "Freelancer"
    assert response.json()["team_id"] is None

    created = client.put(
        "/developers/d9",
        json={"name": "New Dev", "role": "QA", "level": "Junior"},
        headers=seeded,
    )
    assert created.status_code == 200
    assert created.json()["capacity"] == 8

    assert client.delete("/developers/d9", headers=seeded).status_code == 204
    assert {d["id"] for d in client.get("/developers", headers=seeded).json()} == {"d1", "d2"}


def test_developer_capacity_must_be_positive(client, admin_headers):
    response = client.post(
        "/developers",
        json={"name": "Zero", "role": "QA", "level": "Junior", "capacity": 0},
        headers=admin_headers,
    )
    assert response.status_code == 422


def test_utilization_stats_endpoint(client, seeded):
    client.put(
        "/allocations",
        json={"developer_id": "d1", "project_id": "p1", "date": "2024-03-04", "hours": 8},
        headers=seeded,
    )
    table = client.get("/stats/utilization", params={"view": "weekly", "reference": "2024-03-04"}, headers=seeded).json()
    assert table["label"] == "Mar 4 - Mar 8, 2024"
    assert [(r["name"], r["utilization"]) for r in table["internal"]] == [("Alice Chen", 20), ("Bob Smith", 0)]

    chart = client.get("/stats/chart", params={"mode": "weekly", "reference": "2024-03-04"}, headers=seeded).json()
    assert chart["buckets"][1]["booked"] == 8
