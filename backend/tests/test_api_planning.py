"""Planning endpoints: assignments, allocations, absences, plans and the planner grid."""

MON = "2024-03-04"
TUE = "2024-03-05"


def put_hours(client, headers, developer_id, project_id, day, hours):
    return client.put(
        "/allocations",
        json={"developer_id": developer_id, "project_id": project_id, "date": day, "hours": hours},
        headers=headers,
    )


def plan_of(client, headers, developer_id):
    plans = client.get("/plans", headers=headers).json()
    return next(p for p in plans if p["developer_id"] == developer_id)


def test_allocation_upsert_is_idempotent(client, seeded):
    assert put_hours(client, seeded, "d1", "p1", MON, 4).status_code == 200
    assert put_hours(client, seeded, "d1", "p1", MON, 4).status_code == 200
    rows = client.get("/allocations", headers=seeded).json()
    assert len(rows) == 1
    assert rows[0]["hours"] == 4

    put_hours(client, seeded, "d1", "p1", MON, 6.5)
    rows = client.get("/allocations", headers=seeded).json()
    assert [r["hours"] for r in rows] == [6.5]


def test_allocation_hours_are_validated(client, seeded):
    assert put_hours(client, seeded, "d1", "p1", MON, 25).status_code == 422
    assert put_hours(client, seeded, "d1", "p1", MON, -1).status_code == 422
    assert put_hours(client, seeded, "d1", "p1", MON, 1.25).status_code == 422


def test_plans_sum_daily_totals(client, seeded):
    put_hours(client, seeded, "d1", "p1", MON, 5)
    put_hours(client, seeded, "d1", "p2", MON, 3)
    plan = plan_of(client, seeded, "d1")
    assert [p["project_id"] for p in plan["projects"]] == ["p1", "p2"]
    assert sum(p["allocations"].get(MON, 0) for p in plan["projects"]) == 8
    assert plan_of(client, seeded, "d2")["projects"] == []


def test_absence_clears_that_days_allocations(client, seeded):
    put_hours(client, seeded, "d1", "p1", MON, 5)
    put_hours(client, seeded, "d1", "p2", MON, 3)
    put_hours(client, seeded, "d1", "p1", TUE, 8)

    response = client.put(
        "/absences",
        json={"developer_id": "d1", "date": MON, "type": "Vacation"},
        headers=seeded,
    )
    assert response.status_code == 200
    assert response.json()["type"] == "Vacation"

    plan = plan_of(client, seeded, "d1")
    assert sum(p["allocations"].get(MON, 0) for p in plan["projects"]) == 0
    assert plan["projects"][0]["allocations"][TUE] == 8
    assert plan["absences"] == {MON: "Vacation"}


def test_absence_none_deletes_row(client, seeded):
    client.put("/absences", json={"developer_id": "d1", "date": MON, "type": "Sick Leave"}, headers=seeded)
    response = client.put("/absences", json={"developer_id": "d1", "date": MON, "type": "None"}, headers=seeded)
    assert response.status_code == 204
    assert client.get("/absences", headers=seeded).json() == []


def test_delete_assignment_cascades_allocations(client, seeded):
    put_hours(client, seeded, "d1", "p1", MON, 5)
    put_hours(client, seeded, "d1", "p2", MON, 3)
    assert client.delete("/assignments/d1/p1", headers=seeded).status_code == 204

    rows = client.get("/allocations", headers=seeded).json()
    assert [(r["project_id"], r["hours"]) for r in rows] == [("p2", 3)]
    assert [a["project_id"] for a in client.get("/assignments", headers=seeded).json()] == ["p2"]


def test_assigning_twice_keeps_one_row(client, seeded):
    response = client.post("/assignments", json={"developer_id": "d1", "project_id": "p1"}, headers=seeded)
    assert response.status_code == 201
    assignments = client.get("/assignments", headers=seeded).json()
    assert len([a for a in assignments if a["project_id"] == "p1"]) == 1


def test_allocation_range_filter(client, seeded):
    put_hours(client, seeded, "d1", "p1", MON, 5)
    put_hours(client, seeded, "d1", "p1", "2024-03-12", 5)
    rows = client.get("/allocations", params={"start": MON, "end": "2024-03-08"}, headers=seeded).json()
    assert [r["date"] for r in rows] == [MON]


def test_planner_grid_reflects_bookings(client, seeded):
    put_hours(client, seeded, "d1", "p1", MON, 6)
    put_hours(client, seeded, "d1", "p2", MON, 4)
    grid = client.get("/planner", params={"week": "2024-03-06"}, headers=seeded).json()
    assert grid["week_start"] == MON
    assert len(grid["dates"]) == 5
    team = grid["groups"][0]
    assert team["team_name"] == "Alpha Squad"
    alice = next(d for d in team["developers"] if d["developer_id"] == "d1")
    assert alice["days"][0]["total"] == 10
    assert alice["days"][0]["status"] == "over"


def test_biweekly_planner_covers_ten_days(client, seeded):
    grid = client.get("/planner", params={"week": MON, "biweekly": True}, headers=seeded).json()
    assert grid["mode"] == "biweekly"
    assert len(grid["dates"]) == 10


def test_release_toggle(client, seeded):
    body = {"developer_id": "d1", "project_id": "p1", "date": MON}
    created = client.post("/events/release", json=body, headers=seeded)
    assert created.status_code == 200
    assert created.json()["type"] == "Release"

    grid = client.get("/planner", params={"week": MON}, headers=seeded).json()
    alice = next(d for d in grid["groups"][0]["developers"] if d["developer_id"] == "d1")
    assert alice["projects"][0]["cells"][0]["release"] is True

    removed = client.post("/events/release", json=body, headers=seeded)
    assert removed.status_code == 204
    assert client.get("/events", headers=seeded).json() == []


def test_tasks_attach_to_cells(client, seeded):
    response = client.post(
        "/tasks",
        json={"developer_id": "d1", "project_id": "p1", "date": MON, "title": "JIRA-1", "url": "https://jira/1"},
        headers=seeded,
    )
    assert response.status_code == 201
    task_id = response.json()["id"]
    assert len(client.get("/tasks", params={"developer_id": "d1"}, headers=seeded).json()) == 1
    assert client.delete(f"/tasks/{task_id}", headers=seeded).status_code == 204
    assert client.get("/tasks", headers=seeded).json() == []


def test_dashboard_scenario(client, seeded):
    for day in ("2024-03-04", "2024-03-05", "2024-03-06", "2024-03-07", "2024-03-08"):
        put_hours(client, seeded, "d1", "p1", day, 8)
    client.post("/assignments", json={"developer_id": "d2", "project_id": "p1"}, headers=seeded)
    put_hours(client, seeded, "d2", "p1", "2024-03-04", 10)
    put_hours(client, seeded, "d2", "p1", "2024-03-05", 10)

    body = client.get("/dashboard", params={"today": MON}, headers=seeded).json()
    workload = body["workload"]
    assert workload["total_capacity"] == 80
    assert workload["total_booked"] == 60
    assert workload["utilization"] == 75
    assert workload["overloaded"] == []
    assert [d["name"] for d in workload["underloaded"]] == ["Bob Smith"]
    assert workload["available_today"] == []


def test_allocation_requires_assignment(client, seeded):
    response = put_hours(client, seeded, "d2", "p1", MON, 4)
    assert response.status_code == 422
    assert response.json()["detail"] == "Developer is not assigned to this project"


def test_allocation_rejected_on_absent_day(client, seeded):
    client.put("/absences", json={"developer_id": "d1", "date": MON, "type": "Vacation"}, headers=seeded)

    response = put_hours(client, seeded, "d1", "p1", MON, 8)
    assert response.status_code == 422
    assert response.json()["detail"] == "Developer is absent on this day"
    plan = plan_of(client, seeded, "d1")
    assert sum(p["allocations"].get(MON, 0) for p in plan["projects"]) == 0

    assert put_hours(client, seeded, "d1", "p1", MON, 0).status_code == 200
    assert put_hours(client, seeded, "d1", "p1", TUE, 8).status_code == 200

    client.put("/absences", json={"developer_id": "d1", "date": MON, "type": "None"}, headers=seeded)
    assert put_hours(client, seeded, "d1", "p1", MON, 8).status_code == 200


def test_release_cannot_be_added_on_absent_day(client, seeded):
    client.put("/absences", json={"developer_id": "d1", "date": MON, "type": "Sick Leave"}, headers=seeded)
    body = {"developer_id": "d1", "project_id": "p1", "date": MON}

    response = client.post("/events/release", json=body, headers=seeded)
    assert response.status_code == 422
    assert response.json()["detail"] == "Developer is absent on this day"
    assert client.get("/events", headers=seeded).json() == []

    assert client.post("/events/release", json={**body, "date": TUE}, headers=seeded).status_code == 200


def test_dashboard_today_override_is_not_published(client):
    schema = client.get("/openapi.json").json()
    params = schema["paths"]["/dashboard"]["get"].get("parameters", [])
    assert "today" not in [p["name"] for p in params]
