"""Use case for updating employee records."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.application.use_cases.catalogs import EMPLOYEE_REFERENCES, ensure_references_exist
from app.domain.entities import Employee, build_full_name
from app.infrastructure.repositories import EmployeeRepository

from .validators import ensure_valid_dates, ensure_valid_grade

_UPDATABLE_FIELDS = frozenset(
    {
        "employee_number",
        "first_name",
        "last_name",
        "email",
        "phone_number",
        "date_of_birth",
        "hiring_date",
        "current_grade",
        "last_promotion_date",
        "last_allowance_date",
        "status",
        "retirement_date",
        "workplace_id",
        "job_title_id",
        "educational_qualification_id",
    }
)
_REQUIRED_FIELDS = frozenset(
    {
        "employee_number",
        "first_name",
        "last_name",
        "hiring_date",
        "current_grade",
        "status",
    }
)


def update_employee(session: Session, *, employee_id: int, **changes: Any) -> Employee:
    """Apply ``changes`` to the employee; ``full_name`` follows the name fields."""

    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Campos no permitidos: {', '.join(sorted(unknown))}")
    cleared_required = {
        field for field in _REQUIRED_FIELDS if field in changes and changes[field] is None
    }
    if cleared_required:
        raise ValueError(f"Campos obligatorios: {', '.join(sorted(cleared_required))}")

    repository = EmployeeRepository(session)
    current = repository.get(employee_id)
    if current is None:
        raise ValueError("Empleado no encontrado")

    new_number = changes.get("employee_number")
    if new_number and new_number != current.employee_number:
        existing = repository.get_by_number(new_number)
        if existing and existing.id != employee_id:
            raise ValueError("El número de empleado ya está registrado")

    ensure_references_exist(
        session,
        **{field: value for field, value in changes.items() if field in EMPLOYEE_REFERENCES},
    )

    updated = replace(current, **changes)
    updated.full_name = build_full_name(updated.first_name, updated.last_name)
    ensure_valid_grade(updated.current_grade)
    ensure_valid_dates(
        hiring_date=updated.hiring_date,
        date_of_birth=updated.date_of_birth,
        retirement_date=updated.retirement_date,
    )
    return repository.update(updated)
