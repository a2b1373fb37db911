from __future__ import annotations

import pytest

from src.hr_attendance.hr_attendance.container import assemble_container
from src.hr_attendance.hr_attendance.main import create_app


class RecordingConnection:
    def __init__(self):
        self.events = []

    def emit(self, event, payload):
        self.events.append((event, payload))


@pytest.fixture
def container(attendance_repo, employees, notifications_repo):
    return assemble_container(
        employees_repo=employees,
        attendance_repo=attendance_repo,
        notifications_repo=notifications_repo,
    )


@pytest.fixture
def client(container):
    client = create_app(container=container).test_client()
    with client.session_transaction() as s:
        s["user_id"] = 1
        s["role"] = "employee"
    return client


def test_send_to_offline_user(client, notifications_repo):
    resp = client.post("/api/notifications", json={"receiverId": 2, "message": "Payslip ready", "type": "hr"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["delivered"] is False
    assert body["notification"]["userId"] == 2
    assert len(notifications_repo.items) == 1


def test_send_to_online_user(client, container):
    conn = RecordingConnection()
    container.notification_relay.register(2, conn)

    resp = client.post("/api/notifications", json={"receiverId": 2, "message": "Hi"})

    assert resp.get_json()["delivered"] is True
    assert conn.events[0][0] == "new_notification"


def test_send_validates_input(client):
    assert client.post("/api/notifications", json={"message": "no receiver"}).status_code == 400
    assert client.post("/api/notifications", json={"receiverId": 2, "message": ""}).status_code == 400


def test_list_and_mark_read(client, container):
    container.notification_relay.send(1, "first")
    container.notification_relay.send(1, "second")
    container.notification_relay.send(2, "not mine")

    items = client.get("/api/notifications").get_json()
    assert {n["message"] for n in items} == {"first", "second"}

    resp = client.patch(f"/api/notifications/{items[0]['id']}/read")
    assert resp.status_code == 200
    assert client.patch("/api/notifications/999/read").status_code == 404


def test_send_rejects_non_string_type(client, notifications_repo):
    resp = client.post("/api/notifications", json={"receiverId": 2, "message": "Hi", "type": 5})

    assert resp.status_code == 400
    assert resp.get_json() == {"msg": "type must be a string"}
    assert notifications_repo.items == []


def test_stream_head_leaves_user_offline(client, container):
    relay = container.notification_relay

    resp = client.head("/api/notifications/stream")
    resp.close()

    assert resp.status_code == 200
    assert relay.is_online(1) is False
    assert relay.send(1, "hi").delivered is False


def test_stream_registers_on_read_and_disconnects_on_close(client, container):
    relay = container.notification_relay

    resp = client.get("/api/notifications/stream")
    assert relay.is_online(1) is False

    first = next(iter(resp.response))
    assert b"event: registered" in first
    assert relay.is_online(1) is True

    resp.close()
    assert relay.is_online(1) is False


def test_stream_with_malformed_session_identity_is_401(container):
    client = create_app(container=container).test_client()
    with client.session_transaction() as s:
        s["user_id"] = "not-a-number"

    resp = client.get("/api/notifications/stream")

    assert resp.status_code == 401
    assert resp.get_json() == {"msg": "Invalid session identity"}
