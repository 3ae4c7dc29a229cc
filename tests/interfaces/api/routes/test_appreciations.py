"""Tests for the appreciation and disciplinary record endpoints."""

from __future__ import annotations

from datetime import date

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from main import create_app

PASSWORD = "StrongPass123"


def _auth_headers(client: TestClient, email: str) -> dict[str, str]:
    response = client.post(
        "/auth/token",
        data={"username": email, "password": PASSWORD},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _record(employee_id: int, **overrides):
    payload = {
        "employee_id": employee_id,
        "type": "appreciation",
        "description": "Carta de agradecimiento ministerial por el censo",
        "issued_on": "2024-03-15",
        "issued_by": "Ministerio",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def employee_id(make_user, make_employee) -> int:
    make_user(email="manager@example.com", role_alias="manager")
    make_user(email="user@example.com", role_alias="user")
    return make_employee(employee_number="E-1", hiring_date=date(2018, 4, 2))


@pytest.mark.parametrize(
    ("description", "expected_months"),
    [
        ("Carta de agradecimiento ministerial por el censo", 6),
        ("CARTA DE AGRADECIMIENTO DEL DIRECTOR GENERAL", 1),
        ("Felicitación del jefe de área", 0),
    ],
)
def test_letters_of_thanks_grant_service_months_by_kind(
    employee_id: int, description: str, expected_months: int
) -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            "/appreciations/",
            json=_record(employee_id, description=description),
            headers=_auth_headers(client, "manager@example.com"),
        )

    assert response.status_code == 201
    assert response.json()["additional_service_months"] == expected_months


def test_explicit_service_months_take_precedence(employee_id: int) -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            "/appreciations/",
            json=_record(employee_id, additional_service_months=3),
            headers=_auth_headers(client, "manager@example.com"),
        )

    assert response.json()["additional_service_months"] == 3


def test_disciplinary_records_never_grant_service_months(employee_id: int) -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        sanction = client.post(
            "/appreciations/",
            json=_record(
                employee_id,
                type="disciplinary",
                description="Amonestación escrita",
                additional_service_months=4,
            ),
            headers=headers,
        )
        letter_id = client.post(
            "/appreciations/", json=_record(employee_id), headers=headers
        ).json()["id"]
        demoted = client.put(
            f"/appreciations/{letter_id}", json={"type": "disciplinary"}, headers=headers
        )

    assert sanction.status_code == 201
    assert sanction.json()["additional_service_months"] == 0
    assert demoted.status_code == 200
    assert demoted.json()["type"] == "disciplinary"
    assert demoted.json()["additional_service_months"] == 0


def test_record_lifecycle(employee_id: int) -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "manager@example.com")
        record_id = client.post(
            "/appreciations/", json=_record(employee_id), headers=headers
        ).json()["id"]

        read = client.get(f"/appreciations/{record_id}", headers=headers)
        updated = client.put(
            f"/appreciations/{record_id}",
            json={"issued_by": "Despacho del ministro"},
            headers=headers,
        )
        listed = client.get(
            "/appreciations/", params={"employee_id": employee_id}, headers=headers
        )
        deleted = client.delete(f"/appreciations/{record_id}", headers=headers)
        missing = client.get(f"/appreciations/{record_id}", headers=headers)

    assert read.json()["issued_on"] == "2024-03-15"
    assert updated.json()["issued_by"] == "Despacho del ministro"
    assert updated.json()["additional_service_months"] == 6
    assert [item["id"] for item in listed.json()] == [record_id]
    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Registro no encontrado"


def test_record_for_unknown_employee_returns_404(employee_id: int) -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            "/appreciations/",
            json=_record(999),
            headers=_auth_headers(client, "manager@example.com"),
        )

    assert response.status_code == 404
    assert response.json()["detail"] == "Empleado no encontrado"


def test_regular_users_can_read_but_not_record(employee_id: int) -> None:
    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "user@example.com")
        created = client.post("/appreciations/", json=_record(employee_id), headers=headers)
        listed = client.get("/appreciations/", headers=headers)

    assert created.status_code == 403
    assert listed.status_code == 200
    assert listed.json() == []
