"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

NOTIFICATION_TYPE_ALLOWANCE = "allowance"
NOTIFICATION_TYPE_PROMOTION = "promotion"
NOTIFICATION_TYPE_RETIREMENT = "retirement"
NOTIFICATION_TYPE_WARNING = "warning"
NOTIFICATION_TYPE_TEST = "test"

RELATED_TYPE_EMPLOYEE = "employee"


@dataclass
class Notification:
    """Information message delivered to a user, or to everyone when
    ``user_id`` is ``None``."""

    id: int | None
    user_id: int | None
    type: str
    title: str
    message: str
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None
    related_id: int | None = None
    related_type: str | None = None
    due_date: date | None = None

    def is_broadcast(self) -> bool:
        """Return ``True`` when the notification targets every user."""

        return self.user_id is None


__all__ = [
    "Notification",
    "NOTIFICATION_TYPE_ALLOWANCE",
    "NOTIFICATION_TYPE_PROMOTION",
    "NOTIFICATION_TYPE_RETIREMENT",
    "NOTIFICATION_TYPE_WARNING",
    "NOTIFICATION_TYPE_TEST",
    "RELATED_TYPE_EMPLOYEE",
]
