from __future__ import annotations

import pytest

from src.time_tracker.time_tracker.main import create_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email, password="password"):
    return client.post("/api/login", json={"email": email, "password": password})


def test_login_returns_user_without_password(client):
    resp = _login(client, "admin@example.com")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == "user-1"
    assert body["role"] == "Admin"
    assert "password" not in body


def test_bad_credentials_and_anonymous_access(client):
    assert _login(client, "admin@example.com", "nope").status_code == 401
    assert client.get("/api/tasks").status_code == 401


def test_member_cannot_use_admin_endpoints(client):
    _login(client, "member@example.com")

    assert client.get("/api/users").status_code == 403
    assert client.delete("/api/tasks/task-1").status_code == 403

    tasks = client.get("/api/tasks").get_json()
    assert {t["assigneeId"] for t in tasks} == {"user-2"}


def test_admin_cannot_delete_last_admin(client):
    _login(client, "admin@example.com")

    assert client.delete("/api/users/user-1").status_code == 409
    assert client.delete("/api/users/user-404").status_code == 404
    assert client.delete("/api/users/user-2").status_code == 200
    assert client.get("/api/tasks/task-1").get_json()["assigneeId"] == "user-1"


def test_update_member_partial_body_keeps_password(client):
    _login(client, "admin@example.com")

    resp = client.put("/api/users/user-2", json={"designation": "Tech Lead", "password": ""})
    assert resp.status_code == 200
    assert resp.get_json()["designation"] == "Tech Lead"

    client.post("/api/logout")
    assert _login(client, "member@example.com").status_code == 200


def test_invalid_role_is_rejected(client):
    _login(client, "admin@example.com")

    resp = client.post("/api/users", json={"name": "X", "email": "x@example.com", "role": "Owner"})

    assert resp.status_code == 400


def test_timer_flow(client):
    _login(client, "member@example.com")

    started = client.post("/api/tasks/task-2/timer/start")
    assert started.status_code == 201
    log_id = started.get_json()["id"]

    active = client.get("/api/tasks/task-2/timer").get_json()
    assert active["log"]["id"] == log_id

    assert client.post(f"/api/timelogs/{log_id}/pause").status_code == 200
    assert client.post(f"/api/timelogs/{log_id}/pause").status_code == 409
    assert client.post(f"/api/timelogs/{log_id}/resume").status_code == 200

    stopped = client.post(f"/api/timelogs/{log_id}/stop").get_json()
    assert stopped["endTime"] is not None
    assert stopped["isPaused"] is False
    assert client.get("/api/tasks/task-2/timer").get_json()["log"] is None

    assert client.post("/api/tasks/task-404/timer/start").status_code == 404


def test_timer_of_other_user_is_forbidden(client):
    _login(client, "member@example.com")
    log_id = client.post("/api/tasks/task-2/timer/start").get_json()["id"]
    client.post("/api/logout")

    _login(client, "admin@example.com")
    assert client.post(f"/api/timelogs/{log_id}/stop").status_code == 403


def test_departments_and_reports(client):
    _login(client, "admin@example.com")

    assert client.post("/api/departments", json={"name": "HR"}).status_code == 201
    assert client.post("/api/departments", json={"name": "HR"}).status_code == 201
    assert client.get("/api/departments").get_json().count("HR") == 1
    assert client.post("/api/departments", json={"name": ""}).status_code == 400

    report = client.get("/api/reports?period=all").get_json()
    assert report["projectHours"] == [{"name": "Marketing Campaign Q3", "hours": 2.5}]
    assert client.get("/api/reports?period=decade").status_code == 400


def test_member_cannot_promote_themselves_through_profile(client):
    _login(client, "member@example.com")

    resp = client.put("/api/me", json={"role": "Admin", "designation": "Lead"})

    assert resp.status_code == 200
    assert resp.get_json()["role"] == "Member"
    assert resp.get_json()["designation"] == "Lead"
    assert client.get("/api/users").status_code == 403
    assert client.get("/api/me").get_json()["role"] == "Member"


def test_deleted_member_session_is_rejected(app):
    member = app.test_client()
    admin = app.test_client()
    _login(member, "member@example.com")
    _login(admin, "admin@example.com")

    assert admin.delete("/api/users/user-2").status_code == 200

    assert member.post("/api/tasks/task-1/timer/start").status_code == 401
    assert member.get("/api/me").status_code == 401
    container = app.extensions["time_tracker"]
    assert container.timer_service.list_time_logs_for_user("user-2") == []


def test_demoted_admin_loses_admin_access_at_once(app):
    first = app.test_client()
    second = app.test_client()
    _login(first, "admin@example.com")
    created = first.post(
        "/api/users",
        json={"name": "Second Admin", "email": "second@example.com", "role": "Admin", "password": "secret1"},
    ).get_json()
    _login(second, "second@example.com", "secret1")
    assert second.get("/api/users").status_code == 200

    assert first.put(f"/api/users/{created['id']}", json={"role": "Member"}).status_code == 200

    assert second.get("/api/users").status_code == 403
    assert second.get("/api/me").get_json()["role"] == "Member"


def test_member_reads_only_own_tasks(client):
    _login(client, "admin@example.com")
    assert client.put("/api/tasks/task-1", json={"assigneeId": "user-1"}).status_code == 200
    client.post("/api/logout")

    _login(client, "member@example.com")
    assert client.get("/api/tasks/task-1").status_code == 403
    assert client.get("/api/tasks/task-2").status_code == 200
    assert "task-1" not in {t["id"] for t in client.get("/api/tasks").get_json()}
