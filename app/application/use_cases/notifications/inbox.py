"""Use cases for reading and managing a user's notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification, User
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, *, user: User, limit: int | None = 50
) -> Sequence[Notification]:
    """Return the user's own and broadcast notifications, newest first."""

    return NotificationRepository(session).list_for_user(user.id, limit=limit)


def count_unread_notifications(session: Session, *, user: User) -> int:
    return NotificationRepository(session).count_unread_for_user(user.id)


def mark_notification_as_read(
    session: Session, *, user: User, notification_id: int
) -> Notification:
    """Flag a notification visible to ``user`` as read."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None or not _is_visible_to(notification, user):
        raise ValueError("Notificación no encontrada")
    updated = repository.mark_as_read(notification_id)
    if updated is None:
        raise ValueError("Notificación no encontrada")
    return updated


def mark_all_notifications_as_read(session: Session, *, user: User) -> int:
    return NotificationRepository(session).mark_all_as_read(user.id)


def delete_notification(session: Session, notification_id: int) -> None:
    if not NotificationRepository(session).delete(notification_id):
        raise ValueError("Notificación no encontrada")


def _is_visible_to(notification: Notification, user: User) -> bool:
    return notification.is_broadcast() or notification.user_id == user.id


__all__ = [
    "list_notifications",
    "count_unread_notifications",
    "mark_notification_as_read",
    "mark_all_notifications_as_read",
    "delete_notification",
]
