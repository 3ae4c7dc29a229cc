"""Tests for the notification endpoints and the on-demand entitlement check."""

from __future__ import annotations

from datetime import date

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.application.use_cases.entitlements import PassError, check_due
from main import create_app

PASSWORD = "StrongPass123"
TODAY = date(2024, 11, 15)


def _auth_headers(client: TestClient, email: str) -> dict[str, str]:
    response = client.post(
        "/auth/token",
        data={"username": email, "password": PASSWORD},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(check_due, "today_in_app_timezone", lambda: TODAY)
    return TODAY


@pytest.fixture
def users(make_user):
    return {
        "admin": make_user(email="admin@example.com", role_alias="admin"),
        "manager": make_user(email="manager@example.com", role_alias="manager"),
        "user": make_user(email="user@example.com", role_alias="user"),
    }


def test_check_due_creates_notifications_once(users, make_employee, fixed_today) -> None:
    employee_id = make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20))

    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "admin@example.com")
        first = client.post("/notifications/check-due", headers=headers)
        second = client.post("/notifications/check-due", headers=headers)
        inbox = client.get("/notifications/", headers=headers)

    assert first.status_code == 200
    payload = first.json()
    assert payload["success"] is True
    assert payload["checked_on"] == "2024-11-15"
    assert payload["events_due"] == 1
    assert payload["notifications_created"] == 2

    assert second.status_code == 200
    assert second.json()["notifications_created"] == 0
    assert second.json()["already_notified"] == 1

    notifications = inbox.json()
    assert len(notifications) == 1
    assert notifications[0]["type"] == "allowance"
    assert notifications[0]["related_id"] == employee_id
    assert notifications[0]["due_date"] == "2024-11-20"
    assert notifications[0]["is_read"] is False


@pytest.mark.parametrize("email", ["manager@example.com", "user@example.com"])
def test_check_due_is_restricted_to_admins(users, email) -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            "/notifications/check-due", headers=_auth_headers(client, email)
        )

    assert response.status_code == 403


def test_check_due_reports_failed_pass(users, monkeypatch) -> None:
    def fail(session, **kwargs):
        raise PassError("No se pudieron cargar los empleados")

    monkeypatch.setattr(check_due, "check_due_entitlements", fail)

    with TestClient(create_app()) as client:
        response = client.post(
            "/notifications/check-due",
            headers=_auth_headers(client, "admin@example.com"),
        )

    assert response.status_code == 500
    assert response.json()["detail"] == (
        "Ocurrió un error al revisar los incrementos y ascensos pendientes"
    )


def test_unread_count_and_mark_read(users, make_employee, fixed_today) -> None:
    make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20))
    make_employee(employee_number="E-2", hiring_date=date(2021, 1, 10))

    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        client.post(
            "/notifications/check-due",
            headers=_auth_headers(client, "admin@example.com"),
        )

        assert client.get("/notifications/unread-count", headers=headers).json() == {
            "count": 2
        }

        first_id = client.get("/notifications/", headers=headers).json()[0]["id"]
        read = client.put(f"/notifications/{first_id}/read", headers=headers)
        assert read.status_code == 200
        assert read.json()["is_read"] is True
        assert read.json()["read_at"] is not None

        assert client.get("/notifications/unread-count", headers=headers).json() == {
            "count": 1
        }

        mark_all = client.put("/notifications/mark-all-read", headers=headers)
        assert mark_all.json() == {"updated": 1}
        assert client.get("/notifications/unread-count", headers=headers).json() == {
            "count": 0
        }


def test_users_cannot_read_other_users_notifications(users) -> None:
    with TestClient(create_app()) as client:
        admin_headers = _auth_headers(client, "admin@example.com")
        created = client.post(
            "/notifications/",
            json={
                "user_id": users["admin"],
                "title": "Privada",
                "message": "Solo para el administrador",
                "type": "warning",
            },
            headers=admin_headers,
        )
        assert created.status_code == 201

        user_headers = _auth_headers(client, "user@example.com")
        inbox = client.get("/notifications/", headers=user_headers)
        read = client.put(
            f"/notifications/{created.json()['id']}/read", headers=user_headers
        )

    assert inbox.json() == []
    assert read.status_code == 404


def test_broadcast_notifications_reach_everyone(users) -> None:
    with TestClient(create_app()) as client:
        created = client.post(
            "/notifications/",
            json={"title": "Aviso", "message": "Mantenimiento", "type": "warning"},
            headers=_auth_headers(client, "admin@example.com"),
        )
        inbox = client.get(
            "/notifications/", headers=_auth_headers(client, "user@example.com")
        )

    assert created.status_code == 201
    assert created.json()["user_id"] is None
    assert [item["title"] for item in inbox.json()] == ["Aviso"]


def test_non_admin_cannot_publish_or_delete(users) -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "user@example.com")
        created = client.post(
            "/notifications/",
            json={"title": "Aviso", "message": "Mensaje", "type": "warning"},
            headers=headers,
        )
        deleted = client.delete("/notifications/1", headers=headers)

    assert created.status_code == 403
    assert deleted.status_code == 403


def test_test_notification_and_delete(users) -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "admin@example.com")
        created = client.post("/notifications/test", headers=headers)
        notification_id = created.json()["id"]
        deleted = client.delete(f"/notifications/{notification_id}", headers=headers)
        missing = client.delete(f"/notifications/{notification_id}", headers=headers)
        inbox = client.get("/notifications/", headers=headers)

    assert created.status_code == 201
    assert created.json()["type"] == "test"
    assert created.json()["user_id"] == users["admin"]
    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert inbox.json() == []
