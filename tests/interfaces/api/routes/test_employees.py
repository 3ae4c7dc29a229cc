"""Tests for the employee and allowance/promotion order endpoints."""

from __future__ import annotations

from datetime import date

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.utils import today_in_app_timezone
from main import create_app

PASSWORD = "StrongPass123"


def _auth_headers(client: TestClient, email: str) -> dict[str, str]:
    response = client.post(
        "/auth/token",
        data={"username": email, "password": PASSWORD},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _employee_payload(**overrides):
    payload = {
        "employee_number": "E-100",
        "first_name": "María",
        "last_name": "López",
        "hiring_date": "2019-06-03",
        "current_grade": 3,
        "email": "maria.lopez@example.com",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def staff(make_user):
    make_user(email="manager@example.com", role_alias="manager")
    make_user(email="user@example.com", role_alias="user")


def test_manager_can_register_and_update_employees() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        created = client.post("/employees/", json=_employee_payload(), headers=headers)
        employee_id = created.json()["id"]
        updated = client.put(
            f"/employees/{employee_id}",
            json={"last_name": "López Ruiz", "current_grade": 4},
            headers=headers,
        )
        listed = client.get("/employees/", params={"status": "active"}, headers=headers)

    assert created.status_code == 201
    assert created.json()["full_name"] == "María López"
    assert updated.status_code == 200
    assert updated.json()["full_name"] == "María López Ruiz"
    assert updated.json()["current_grade"] == 4
    assert [item["id"] for item in listed.json()] == [employee_id]


def test_duplicate_employee_number_is_rejected() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        client.post("/employees/", json=_employee_payload(), headers=headers)
        duplicate = client.post("/employees/", json=_employee_payload(), headers=headers)

    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "El número de empleado ya está registrado"


def test_regular_users_can_read_but_not_write() -> None:
    with TestClient(create_app()) as client:
        created = client.post(
            "/employees/",
            json=_employee_payload(),
            headers=_auth_headers(client, "manager@example.com"),
        )
        headers = _auth_headers(client, "user@example.com")
        read = client.get(f"/employees/{created.json()['id']}", headers=headers)
        write = client.post(
            "/employees/", json=_employee_payload(employee_number="E-200"), headers=headers
        )

    assert read.status_code == 200
    assert write.status_code == 403


def test_unknown_employee_returns_404() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        read = client.get("/employees/999", headers=headers)
        delete = client.delete("/employees/999", headers=headers)

    assert read.status_code == 404
    assert delete.status_code == 404


def test_entitlements_endpoint_returns_next_due_dates() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        created = client.post(
            "/employees/",
            json=_employee_payload(retirement_date="2045-06-03"),
            headers=headers,
        )
        response = client.get(
            f"/employees/{created.json()['id']}/entitlements", headers=headers
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["retirement_date"] == "2045-06-03"
    checked_on = date.fromisoformat(payload["checked_on"])
    next_allowance = date.fromisoformat(payload["next_allowance_date"])
    next_promotion = date.fromisoformat(payload["next_promotion_date"])
    assert checked_on <= today_in_app_timezone()
    assert (next_allowance.month, next_allowance.day) == (6, 3)
    assert next_allowance >= checked_on
    assert (next_promotion.year - 2019) % 4 == 0
    assert next_promotion.year > checked_on.year


def test_order_lifecycle() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        employee_id = client.post(
            "/employees/", json=_employee_payload(), headers=headers
        ).json()["id"]

        created = client.post(
            "/allowance-promotions/",
            json={"employee_id": employee_id, "type": "allowance", "due_date": "2025-06-03"},
            headers=headers,
        )
        order_id = created.json()["id"]
        processed = client.put(
            f"/allowance-promotions/{order_id}/process",
            json={"status": "completed", "notes": "Aplicado en nómina"},
            headers=headers,
        )
        again = client.put(
            f"/allowance-promotions/{order_id}/process",
            json={"status": "rejected"},
            headers=headers,
        )
        pending = client.get(
            "/allowance-promotions/", params={"status": "pending"}, headers=headers
        )

    assert created.status_code == 201
    assert created.json()["status"] == "pending"
    assert processed.status_code == 200
    assert processed.json()["status"] == "completed"
    assert processed.json()["processed_by"] is not None
    assert processed.json()["notes"] == "Aplicado en nómina"
    assert again.status_code == 400
    assert pending.json() == []


def test_order_for_unknown_employee_is_rejected() -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            "/allowance-promotions/",
            json={"employee_id": 999, "type": "promotion", "due_date": "2025-06-03"},
            headers=_auth_headers(client, "manager@example.com"),
        )

    assert response.status_code == 400
    assert response.json()["detail"] == "Empleado no encontrado"


def test_pending_order_can_be_read_and_edited_until_processed() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        employee_id = client.post(
            "/employees/", json=_employee_payload(), headers=headers
        ).json()["id"]
        order_id = client.post(
            "/allowance-promotions/",
            json={"employee_id": employee_id, "type": "allowance", "due_date": "2025-06-03"},
            headers=headers,
        ).json()["id"]

        read = client.get(f"/allowance-promotions/{order_id}", headers=headers)
        edited = client.put(
            f"/allowance-promotions/{order_id}",
            json={"type": "promotion", "due_date": "2025-07-01", "notes": "Revisar grado"},
            headers=headers,
        )
        pending = client.get("/allowance-promotions/pending", headers=headers)
        client.put(
            f"/allowance-promotions/{order_id}/process",
            json={"status": "completed"},
            headers=headers,
        )
        locked = client.put(
            f"/allowance-promotions/{order_id}",
            json={"notes": "Tarde"},
            headers=headers,
        )
        pending_after = client.get("/allowance-promotions/pending", headers=headers)

    assert read.status_code == 200
    assert read.json()["due_date"] == "2025-06-03"
    assert edited.status_code == 200
    assert edited.json()["type"] == "promotion"
    assert edited.json()["due_date"] == "2025-07-01"
    assert edited.json()["status"] == "pending"
    assert [item["id"] for item in pending.json()] == [order_id]
    assert locked.status_code == 400
    assert locked.json()["detail"] == "La orden ya fue procesada"
    assert pending_after.json() == []


def test_order_edit_rejects_status_changes_and_unknown_orders() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        employee_id = client.post(
            "/employees/", json=_employee_payload(), headers=headers
        ).json()["id"]
        order_id = client.post(
            "/allowance-promotions/",
            json={"employee_id": employee_id, "type": "allowance", "due_date": "2025-06-03"},
            headers=headers,
        ).json()["id"]

        status_change = client.put(
            f"/allowance-promotions/{order_id}",
            json={"status": "completed"},
            headers=headers,
        )
        missing_read = client.get("/allowance-promotions/999", headers=headers)
        missing_edit = client.put(
            "/allowance-promotions/999", json={"notes": "x"}, headers=headers
        )
        user_edit = client.put(
            f"/allowance-promotions/{order_id}",
            json={"notes": "x"},
            headers=_auth_headers(client, "user@example.com"),
        )

    assert status_change.status_code == 422
    assert missing_read.status_code == 404
    assert missing_read.json()["detail"] == "Orden no encontrada"
    assert missing_edit.status_code == 404
    assert user_edit.status_code == 403


def test_employee_history_lists_orders_and_appreciations() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        employee_id = client.post(
            "/employees/", json=_employee_payload(), headers=headers
        ).json()["id"]
        other_id = client.post(
            "/employees/",
            json=_employee_payload(employee_number="E-200", email="otro@example.com"),
            headers=headers,
        ).json()["id"]
        for owner in (employee_id, other_id):
            client.post(
                "/allowance-promotions/",
                json={"employee_id": owner, "type": "promotion", "due_date": "2026-06-03"},
                headers=headers,
            )
            client.post(
                "/appreciations/",
                json={
                    "employee_id": owner,
                    "type": "appreciation",
                    "description": "Reconocimiento por el cierre anual",
                    "issued_on": "2024-12-20",
                    "issued_by": "Dirección",
                },
                headers=headers,
            )

        orders = client.get(f"/employees/{employee_id}/allowance-promotions", headers=headers)
        records = client.get(f"/employees/{employee_id}/appreciations", headers=headers)
        missing = client.get("/employees/999/appreciations", headers=headers)

    assert [item["employee_id"] for item in orders.json()] == [employee_id]
    assert [item["employee_id"] for item in records.json()] == [employee_id]
    assert missing.status_code == 404


def test_employee_references_must_exist_in_the_catalogues() -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        workplace_id = client.post(
            "/workplaces/", json={"name": "Sede central"}, headers=headers
        ).json()["id"]

        created = client.post(
            "/employees/",
            json=_employee_payload(workplace_id=workplace_id),
            headers=headers,
        )
        rejected = client.post(
            "/employees/",
            json=_employee_payload(employee_number="E-300", job_title_id=42),
            headers=headers,
        )
        bad_update = client.put(
            f"/employees/{created.json()['id']}",
            json={"educational_qualification_id": 7},
            headers=headers,
        )

    assert created.status_code == 201
    assert created.json()["workplace_id"] == workplace_id
    assert rejected.status_code == 400
    assert rejected.json()["detail"] == "Cargo no encontrado"
    assert bad_update.status_code == 400
    assert bad_update.json()["detail"] == "Titulación no encontrada"
