"""Public helpers for emitting and reading notifications."""

from .events import FanOutResult, notify_admins, notify_user
from .inbox import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)

__all__ = [
    "FanOutResult",
    "notify_admins",
    "notify_user",
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
