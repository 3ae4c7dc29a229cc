"""Integration tests for the user API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.infrastructure.database import SessionLocal
from app.infrastructure.models import RoleModel
from main import create_app

PASSWORD = "StrongPass123"


def _auth_headers(client: TestClient, email: str, password: str = PASSWORD) -> dict[str, str]:
    response = client.post(
        "/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _role_id(alias: str) -> int:
    with SessionLocal() as session:
        return session.query(RoleModel).filter_by(alias=alias).one().id


def test_default_roles_are_seeded() -> None:
    with SessionLocal() as session:
        aliases = {alias for (alias,) in session.query(RoleModel.alias).all()}

    assert aliases == {"admin", "manager", "user"}


def test_admin_creates_lists_and_deletes_users(make_user) -> None:
    make_user(email="admin@example.com")

    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "admin@example.com")
        created = client.post(
            "/users/",
            json={
                "name": "Gerente",
                "email": "gerente@example.com",
                "role_id": _role_id("manager"),
                "password": "ManagerPass123",
            },
            headers=headers,
        )
        user_id = created.json()["id"]
        listed = client.get("/users/", headers=headers)
        deleted = client.delete(f"/users/{user_id}", headers=headers)
        login_after_delete = client.post(
            "/auth/token",
            data={"username": "gerente@example.com", "password": "ManagerPass123"},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    assert created.status_code == 201
    assert created.json()["role"]["alias"] == "manager"
    assert created.json()["must_change_password"] is True
    assert "gerente@example.com" in {user["email"] for user in listed.json()}
    assert deleted.status_code == 204
    assert login_after_delete.status_code == 401


def test_duplicate_email_is_rejected(make_user) -> None:
    make_user(email="admin@example.com")

    with TestClient(create_app()) as client:
        response = client.post(
            "/users/",
            json={
                "name": "Otro",
                "email": "admin@example.com",
                "role_id": _role_id("user"),
                "password": "AnotherPass123",
            },
            headers=_auth_headers(client, "admin@example.com"),
        )

    assert response.status_code == 400
    assert response.json()["detail"] == "El correo electrónico ya está registrado"


def test_regular_user_cannot_change_own_role(make_user) -> None:
    user_id = make_user(email="user@example.com", role_alias="user")

    with TestClient(create_app()) as client:
        headers = _auth_headers(client, "user@example.com")
        forbidden = client.put(
            f"/users/{user_id}", json={"role_id": _role_id("admin")}, headers=headers
        )
        renamed = client.put(f"/users/{user_id}", json={"name": "Nuevo"}, headers=headers)

    assert forbidden.status_code == 403
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Nuevo"


def test_non_admin_cannot_list_users(make_user) -> None:
    make_user(email="manager@example.com", role_alias="manager")

    with TestClient(create_app()) as client:
        response = client.get(
            "/users/", headers=_auth_headers(client, "manager@example.com")
        )

    assert response.status_code == 403
