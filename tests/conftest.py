"""Shared fixtures: a throw-away SQLite database and helpers to seed it."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="hr_entitlements_"))
TEST_DB_PATH = TEST_DB_DIR / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["ENABLE_SCHEDULER"] = "false"
os.environ["APP_TIMEZONE"] = "America/Bogota"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.models import EmployeeModel, RoleModel, UserModel  # noqa: E402
from app.infrastructure.security import get_password_hash  # noqa: E402

DEFAULT_PASSWORD = "StrongPass123"


@pytest.fixture(scope="session", autouse=True)
def database_directory():
    """Remove the per-run database directory once the session ends."""

    yield TEST_DB_PATH
    engine.dispose()
    shutil.rmtree(TEST_DB_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables with the default roles seeded."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session():
    with SessionLocal() as db:
        yield db


def create_user(
    *,
    email: str,
    role_alias: str = "admin",
    password: str = DEFAULT_PASSWORD,
    name: str = "Test User",
    is_active: bool = True,
    must_change_password: bool = False,
    deleted: bool = False,
) -> int:
    """Insert a user with the given role and return its id."""

    with SessionLocal() as db:
        role = db.query(RoleModel).filter_by(alias=role_alias).one()
        user = UserModel(
            role_id=role.id,
            name=name,
            email=email,
            password=get_password_hash(password),
            must_change_password=must_change_password,
            is_active=is_active,
            deleted=deleted,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user.id


def create_employee(
    *,
    employee_number: str,
    hiring_date: date,
    first_name: str = "Ana",
    last_name: str = "Pérez",
    current_grade: int = 1,
    retirement_date: date | None = None,
    status: str = "active",
) -> int:
    """Insert an employee and return its id."""

    with SessionLocal() as db:
        employee = EmployeeModel(
            employee_number=employee_number,
            first_name=first_name,
            last_name=last_name,
            full_name=f"{first_name} {last_name}",
            hiring_date=hiring_date,
            current_grade=current_grade,
            retirement_date=retirement_date,
            status=status,
        )
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee.id


@pytest.fixture
def make_user():
    return create_user


@pytest.fixture
def make_employee():
    return create_employee
