"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used by administrators to publish a notification."""

    user_id: int | None = Field(
        default=None, description="Destinatario; vacío para enviar a todos"
    )
    title: str = Field(..., min_length=1, max_length=120)
    message: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=50)
    related_id: int | None = None
    related_type: str | None = Field(default=None, max_length=50)


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int | None
    type: str
    title: str
    message: str
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None
    related_id: int | None = None
    related_type: str | None = None
    due_date: date | None = None

    model_config = ConfigDict(from_attributes=True)


class UnreadCountRead(BaseModel):
    count: int


class MarkAllReadResponse(BaseModel):
    updated: int


class EntitlementCheckRead(BaseModel):
    """Result of an on-demand entitlement check."""

    success: bool
    message: str
    checked_on: date
    employees_scanned: int
    events_due: int
    already_notified: int
    notifications_created: int
    failed_deliveries: int
    skipped_computations: int
    failed_employees: int


__all__ = [
    "EntitlementCheckRead",
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationRead",
    "UnreadCountRead",
]
