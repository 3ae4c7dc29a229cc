"""Use cases for allowance and promotion orders."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import (
    ORDER_STATUS_PENDING,
    ORDER_STATUSES,
    AllowancePromotion,
    EntitlementKind,
)
from app.infrastructure.repositories import (
    AllowancePromotionRepository,
    EmployeeRepository,
)
from app.utils import now_in_app_timezone

ORDER_TYPES = frozenset({EntitlementKind.ALLOWANCE.value, EntitlementKind.PROMOTION.value})
NOT_FOUND_MESSAGE = "Orden no encontrada"

_EDITABLE_FIELDS = frozenset({"type", "due_date", "notes"})


def list_orders(
    session: Session,
    *,
    employee_id: int | None = None,
    status: str | None = None,
) -> Sequence[AllowancePromotion]:
    if status is not None and status not in ORDER_STATUSES:
        raise ValueError("Estado no válido")
    return AllowancePromotionRepository(session).list(employee_id=employee_id, status=status)


def list_pending_orders(session: Session) -> Sequence[AllowancePromotion]:
    return list_orders(session, status=ORDER_STATUS_PENDING)


def get_order(session: Session, order_id: int) -> AllowancePromotion:
    order = AllowancePromotionRepository(session).get(order_id)
    if order is None:
        raise ValueError(NOT_FOUND_MESSAGE)
    return order


def create_order(
    session: Session,
    *,
    employee_id: int,
    order_type: str,
    due_date: date,
    notes: str | None = None,
) -> AllowancePromotion:
    """Register a pending allowance or promotion for an existing employee."""

    if order_type not in ORDER_TYPES:
        raise ValueError("Tipo no válido")
    if EmployeeRepository(session).get(employee_id) is None:
        raise ValueError("Empleado no encontrado")

    order = AllowancePromotion(
        id=None,
        employee_id=employee_id,
        type=order_type,
        due_date=due_date,
        status=ORDER_STATUS_PENDING,
        notes=notes,
    )
    return AllowancePromotionRepository(session).create(order)


def update_order(session: Session, *, order_id: int, **changes: Any) -> AllowancePromotion:
    """Edit the type, due date or notes of an order that is still pending.

    Decisions go through :func:`process_order` so that the processor and
    the time of processing are always recorded.
    """

    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Campos no permitidos: {', '.join(sorted(unknown))}")
    if "type" in changes and changes["type"] not in ORDER_TYPES:
        raise ValueError("Tipo no válido")
    if "due_date" in changes and changes["due_date"] is None:
        raise ValueError("Campos obligatorios: due_date")

    repository = AllowancePromotionRepository(session)
    order = repository.get(order_id)
    if order is None:
        raise ValueError(NOT_FOUND_MESSAGE)
    if order.status != ORDER_STATUS_PENDING:
        raise ValueError("La orden ya fue procesada")
    return repository.update(replace(order, **changes))


def process_order(
    session: Session,
    *,
    order_id: int,
    status: str,
    processed_by: int,
    notes: str | None = None,
) -> AllowancePromotion:
    """Record the decision taken on an order and who took it."""

    if status not in ORDER_STATUSES or status == ORDER_STATUS_PENDING:
        raise ValueError("Estado no válido")

    repository = AllowancePromotionRepository(session)
    order = repository.get(order_id)
    if order is None:
        raise ValueError(NOT_FOUND_MESSAGE)
    if order.status != ORDER_STATUS_PENDING:
        raise ValueError("La orden ya fue procesada")

    processed = replace(
        order,
        status=status,
        notes=notes if notes is not None else order.notes,
        processed_at=now_in_app_timezone(),
        processed_by=processed_by,
    )
    return repository.update(processed)


def delete_order(session: Session, order_id: int) -> None:
    if not AllowancePromotionRepository(session).delete(order_id):
        raise ValueError(NOT_FOUND_MESSAGE)


__all__ = [
    "NOT_FOUND_MESSAGE",
    "ORDER_TYPES",
    "create_order",
    "delete_order",
    "get_order",
    "list_orders",
    "list_pending_orders",
    "process_order",
    "update_order",
]
