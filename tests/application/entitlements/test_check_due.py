"""Tests for the entitlement check pass."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from app.application.use_cases.entitlements import PassError
from app.application.use_cases.entitlements import check_due
from app.application.use_cases.entitlements.check_due import (
    check_due_entitlements,
    employee_entitlement_dates,
    run_entitlement_check,
)
from app.domain.entities import Employee
from app.infrastructure.database import SessionLocal
from app.infrastructure.models import NotificationModel

TODAY = date(2024, 11, 15)


def _notifications(session):
    return session.query(NotificationModel).order_by(NotificationModel.id).all()


@pytest.fixture
def admins(make_user):
    return [
        make_user(email="admin@example.com", role_alias="admin"),
        make_user(email="manager@example.com", role_alias="manager"),
    ]


@pytest.fixture
def roster(make_employee):
    return {
        "allowance": make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20)),
        "promotion": make_employee(employee_number="E-2", hiring_date=date(2021, 1, 10)),
        "allowance_on_window_end": make_employee(
            employee_number="E-3", hiring_date=date(2021, 12, 15)
        ),
        "nothing_due": make_employee(employee_number="E-4", hiring_date=date(2020, 10, 1)),
        "retirement": make_employee(
            employee_number="E-5",
            hiring_date=date(2000, 6, 1),
            retirement_date=date(2025, 2, 15),
        ),
    }


def test_pass_notifies_every_admin_about_each_due_event(session, admins, roster, make_user):
    make_user(email="clerk@example.com", role_alias="user")
    make_user(email="inactive@example.com", role_alias="admin", is_active=False)
    make_user(email="gone@example.com", role_alias="admin", deleted=True)

    summary = check_due_entitlements(session, today=TODAY)

    assert summary.employees_scanned == 5
    assert summary.events_due == 4
    assert summary.notifications_created == 8
    assert summary.already_notified == 0
    assert summary.failed_deliveries == 0

    notifications = _notifications(session)
    assert {n.user_id for n in notifications} == set(admins)
    keys = {(n.related_id, n.type, n.due_date) for n in notifications}
    assert keys == {
        (roster["allowance"], "allowance", date(2024, 11, 20)),
        (roster["promotion"], "promotion", date(2025, 1, 10)),
        (roster["allowance_on_window_end"], "allowance", date(2024, 12, 15)),
        (roster["retirement"], "retirement", date(2025, 2, 15)),
    }
    assert all(n.related_type == "employee" for n in notifications)
    assert all(n.is_read is False for n in notifications)


def test_notification_message_mentions_employee_and_due_date(session, admins, make_employee):
    make_employee(
        employee_number="E-1",
        first_name="Luis",
        last_name="Gómez",
        hiring_date=date(2020, 11, 20),
    )

    check_due_entitlements(session, today=TODAY)

    notification = _notifications(session)[0]
    assert notification.title == "Incremento salarial próximo"
    assert "Luis Gómez" in notification.message
    assert "2024-11-20" in notification.message


def test_repeated_passes_do_not_duplicate_notifications(session, admins, roster):
    first = check_due_entitlements(session, today=TODAY)
    created = len(_notifications(session))

    second = check_due_entitlements(session, today=TODAY)

    assert len(_notifications(session)) == created
    assert second.events_due == first.events_due
    assert second.already_notified == first.events_due
    assert second.notifications_created == 0


def test_dedup_key_includes_employee_and_kind(session, admins, make_employee):
    first = make_employee(employee_number="E-1", hiring_date=date(2021, 1, 10))
    second = make_employee(employee_number="E-2", hiring_date=date(2021, 1, 10))

    summary = check_due_entitlements(session, today=date(2024, 12, 20))

    # Both employees are due for an allowance and a promotion on the same day.
    assert summary.events_due == 4
    keys = {(n.related_id, n.type, n.due_date) for n in _notifications(session)}
    assert keys == {
        (first, "allowance", date(2025, 1, 10)),
        (first, "promotion", date(2025, 1, 10)),
        (second, "allowance", date(2025, 1, 10)),
        (second, "promotion", date(2025, 1, 10)),
    }


def test_a_later_due_date_is_a_new_event(session, admins, make_employee):
    make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20))

    check_due_entitlements(session, today=TODAY)
    summary = check_due_entitlements(session, today=date(2025, 11, 1))

    assert summary.notifications_created == 2
    due_dates = sorted({n.due_date for n in _notifications(session)})
    assert due_dates == [date(2024, 11, 20), date(2025, 11, 20)]


def _store_raw_date(employee_id: int, column: str, raw: str) -> None:
    with SessionLocal() as db:
        db.execute(
            text(f"UPDATE employee SET {column} = :raw WHERE id = :id"),
            {"raw": raw, "id": employee_id},
        )
        db.commit()


def test_malformed_hiring_date_does_not_stop_the_pass(session, admins, make_employee):
    broken_id = make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20))
    healthy_id = make_employee(employee_number="E-2", hiring_date=date(2020, 11, 20))
    _store_raw_date(broken_id, "hiring_date", "31/02/2020")

    summary = check_due_entitlements(session, today=TODAY)

    assert summary.employees_scanned == 2
    assert summary.skipped_computations == 2
    assert summary.failed_employees == 0
    assert summary.notifications_created == 2
    assert {n.related_id for n in _notifications(session)} == {healthy_id}


def test_malformed_retirement_date_only_skips_that_kind(session, admins, make_employee):
    employee_id = make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20))
    _store_raw_date(employee_id, "retirement_date", "pronto")

    summary = check_due_entitlements(session, today=TODAY)

    assert summary.skipped_computations == 1
    assert {(n.related_id, n.type) for n in _notifications(session)} == {
        (employee_id, "allowance")
    }


def test_unexpected_error_for_one_employee_is_isolated(
    session, admins, make_employee, monkeypatch
):
    failing_id = make_employee(employee_number="E-1", hiring_date=date(2020, 11, 20))
    healthy_id = make_employee(employee_number="E-2", hiring_date=date(2019, 11, 25))
    real_notify = check_due.notify_admins

    def flaky_notify(session, *, employee_id, **kwargs):
        if employee_id == failing_id:
            raise RuntimeError("boom")
        return real_notify(session, employee_id=employee_id, **kwargs)

    monkeypatch.setattr(check_due, "notify_admins", flaky_notify)

    summary = check_due_entitlements(session, today=TODAY)

    assert summary.failed_employees == 1
    assert {n.related_id for n in _notifications(session)} == {healthy_id}


def test_pass_without_admins_creates_nothing(session, roster):
    summary = check_due_entitlements(session, today=TODAY)

    assert summary.events_due == 4
    assert summary.notifications_created == 0
    assert _notifications(session) == []


def test_pass_error_when_employees_cannot_be_loaded(session, monkeypatch):
    def fail(self):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(
        check_due.EmployeeRepository, "list_for_entitlement_check", fail
    )

    with pytest.raises(PassError):
        check_due_entitlements(session, today=TODAY)


def test_run_entitlement_check_uses_its_own_session(admins, roster):
    summary = run_entitlement_check(SessionLocal)

    assert summary.employees_scanned == 5
    assert summary.checked_on is not None


def test_employee_entitlement_dates_reports_uncomputable_kinds_as_none():
    employee = Employee(
        id=1,
        employee_number="E-1",
        first_name="Ana",
        last_name="Pérez",
        hiring_date="invalid",
        current_grade=1,
        retirement_date=date(2040, 1, 1),
    )

    dates = employee_entitlement_dates(employee, today=TODAY)

    assert dates == {
        "allowance": None,
        "promotion": None,
        "retirement": date(2040, 1, 1),
    }


def test_summary_as_dict_serialises_checked_on(session):
    summary = check_due_entitlements(session, today=TODAY)

    assert summary.as_dict()["checked_on"] == "2024-11-15"
