"""Utility helpers to generate domain notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.entitlements.errors import NotificationCreationError
from app.domain.entities import RELATED_TYPE_EMPLOYEE, Notification
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


@dataclass
class FanOutResult:
    """Outcome of delivering one event to every administrator."""

    delivered: list[Notification] = field(default_factory=list)
    failed_recipient_ids: list[int] = field(default_factory=list)


def _persist_notification(
    session: Session,
    *,
    user_id: int | None,
    notification_type: str,
    title: str,
    message: str,
    related_id: int | None = None,
    related_type: str | None = None,
    due_date: date | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        type=notification_type,
        title=title,
        message=message,
        is_read=False,
        created_at=now_in_app_timezone(),
        read_at=None,
        related_id=related_id,
        related_type=related_type,
        due_date=due_date,
    )
    repository = NotificationRepository(session)
    try:
        return repository.create(notification)
    except SQLAlchemyError as exc:
        session.rollback()
        raise NotificationCreationError(
            f"No se pudo guardar la notificación '{title}'", user_id=user_id
        ) from exc


def notify_admins(
    session: Session,
    *,
    employee_id: int,
    title: str,
    message: str,
    kind: str,
    due_date: date | None = None,
) -> FanOutResult:
    """Create one notification per active administrator or manager.

    A failure for one recipient is logged and does not stop delivery to the
    others.
    """

    result = FanOutResult()
    recipients = UserRepository(session).list_admins()
    if not recipients:
        logger.warning(
            "No administrators to notify about %s for employee %s", kind, employee_id
        )
        return result

    for recipient in recipients:
        try:
            saved = _persist_notification(
                session,
                user_id=recipient.id,
                notification_type=kind,
                title=title,
                message=message,
                related_id=employee_id,
                related_type=RELATED_TYPE_EMPLOYEE,
                due_date=due_date,
            )
        except NotificationCreationError:
            logger.exception(
                "Failed to notify user %s about %s for employee %s",
                recipient.id,
                kind,
                employee_id,
            )
            result.failed_recipient_ids.append(recipient.id)
            continue
        result.delivered.append(saved)
    return result


def notify_user(
    session: Session,
    *,
    user_id: int | None,
    notification_type: str,
    title: str,
    message: str,
    related_id: int | None = None,
    related_type: str | None = None,
) -> Notification:
    """Persist a single notification for ``user_id`` (``None`` broadcasts it)."""

    return _persist_notification(
        session,
        user_id=user_id,
        notification_type=notification_type,
        title=title,
        message=message,
        related_id=related_id,
        related_type=related_type,
    )


__all__ = ["FanOutResult", "notify_admins", "notify_user"]
