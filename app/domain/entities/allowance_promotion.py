"""Domain entity describing an allowance or promotion order."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

ORDER_STATUS_PENDING = "pending"
ORDER_STATUS_COMPLETED = "completed"
ORDER_STATUS_REJECTED = "rejected"
ORDER_STATUSES = frozenset(
    {ORDER_STATUS_PENDING, ORDER_STATUS_COMPLETED, ORDER_STATUS_REJECTED}
)


@dataclass
class AllowancePromotion:
    """Administrative order granting an allowance or a promotion."""

    id: int | None
    employee_id: int
    type: str
    due_date: date
    status: str = ORDER_STATUS_PENDING
    notes: str | None = None
    processed_at: datetime | None = None
    processed_by: int | None = None


__all__ = [
    "AllowancePromotion",
    "ORDER_STATUS_PENDING",
    "ORDER_STATUS_COMPLETED",
    "ORDER_STATUS_REJECTED",
    "ORDER_STATUSES",
]
