"""Use cases for appreciation letters and disciplinary sanctions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import (
    APPRECIATION_TYPE_APPRECIATION,
    APPRECIATION_TYPES,
    SERVICE_MONTHS_BY_LETTER,
    Appreciation,
)
from app.infrastructure.repositories import AppreciationRepository, EmployeeRepository

NOT_FOUND_MESSAGE = "Registro no encontrado"

_UPDATABLE_FIELDS = frozenset(
    {"type", "description", "issued_on", "issued_by", "additional_service_months"}
)


def service_months_for(appreciation_type: str, description: str, requested: int | None) -> int:
    """Return the extra months of service granted by the record.

    Disciplinary records never grant months. Letters of thanks take the
    requested amount, or the amount attached to the letter kind named in the
    description when none is requested.
    """

    if appreciation_type != APPRECIATION_TYPE_APPRECIATION:
        return 0
    if requested:
        return requested
    text = description.casefold()
    for letter, months in SERVICE_MONTHS_BY_LETTER:
        if letter in text:
            return months
    return 0


def _ensure_valid(appreciation_type: str, months: int | None) -> None:
    if appreciation_type not in APPRECIATION_TYPES:
        raise ValueError("Tipo no válido")
    if months is not None and months < 0:
        raise ValueError("Los meses de servicio adicionales no pueden ser negativos")


def list_appreciations(
    session: Session, *, employee_id: int | None = None
) -> Sequence[Appreciation]:
    return AppreciationRepository(session).list(employee_id=employee_id)


def get_appreciation(session: Session, appreciation_id: int) -> Appreciation:
    appreciation = AppreciationRepository(session).get(appreciation_id)
    if appreciation is None:
        raise ValueError(NOT_FOUND_MESSAGE)
    return appreciation


def create_appreciation(
    session: Session,
    *,
    employee_id: int,
    appreciation_type: str,
    description: str,
    issued_on: date,
    issued_by: str,
    additional_service_months: int | None = None,
) -> Appreciation:
    """Record a letter of thanks or a sanction for an existing employee."""

    _ensure_valid(appreciation_type, additional_service_months)
    if EmployeeRepository(session).get(employee_id) is None:
        raise ValueError("Empleado no encontrado")

    appreciation = Appreciation(
        id=None,
        employee_id=employee_id,
        type=appreciation_type,
        description=description,
        issued_on=issued_on,
        issued_by=issued_by,
        additional_service_months=service_months_for(
            appreciation_type, description, additional_service_months
        ),
    )
    return AppreciationRepository(session).create(appreciation)


def update_appreciation(
    session: Session, *, appreciation_id: int, **changes: Any
) -> Appreciation:
    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Campos no permitidos: {', '.join(sorted(unknown))}")
    if any(value is None for value in changes.values()):
        raise ValueError("Los campos no pueden quedar vacíos")

    repository = AppreciationRepository(session)
    current = repository.get(appreciation_id)
    if current is None:
        raise ValueError(NOT_FOUND_MESSAGE)

    updated = replace(current, **changes)
    _ensure_valid(updated.type, updated.additional_service_months)
    if updated.is_disciplinary():
        updated.additional_service_months = 0
    return repository.update(updated)


def delete_appreciation(session: Session, appreciation_id: int) -> None:
    if not AppreciationRepository(session).delete(appreciation_id):
        raise ValueError(NOT_FOUND_MESSAGE)


__all__ = [
    "NOT_FOUND_MESSAGE",
    "create_appreciation",
    "delete_appreciation",
    "get_appreciation",
    "list_appreciations",
    "service_months_for",
    "update_appreciation",
]
