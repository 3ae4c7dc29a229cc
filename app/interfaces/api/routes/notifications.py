"""Endpoints for notifications and the on-demand entitlement check."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.entitlements.errors import (
    NotificationCreationError,
    PassError,
)
from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    notify_user,
)
from app.domain.entities import NOTIFICATION_TYPE_TEST, Notification, User
from app.infrastructure.database import get_db
from app.infrastructure.scheduler import EntitlementScheduler
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_entitlement_scheduler,
    require_admin,
)
from app.interfaces.api.schemas import (
    EntitlementCheckRead,
    MarkAllReadResponse,
    NotificationCreate,
    NotificationRead,
    UnreadCountRead,
)
from app.utils import now_in_app_timezone

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

_CHECK_FAILED_MESSAGE = "Ocurrió un error al revisar los incrementos y ascensos pendientes"


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    limit: int = 50,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications_uc(db, user=current_user, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountRead:
    """Return how many visible notifications are still unread."""

    return UnreadCountRead(count=count_unread_notifications(db, user=current_user))


@router.put("/mark-all-read", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    """Mark every visible notification as read."""

    return MarkAllReadResponse(updated=mark_all_notifications_as_read(db, user=current_user))


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Mark one notification as read."""

    try:
        notification = mark_notification_as_read(
            db, user=current_user, notification_id=notification_id
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> NotificationRead:
    """Publish a notification for one user or, without ``user_id``, for all."""

    try:
        notification = notify_user(
            db,
            user_id=notification_in.user_id,
            notification_type=notification_in.type,
            title=notification_in.title,
            message=notification_in.message,
            related_id=notification_in.related_id,
            related_type=notification_in.related_type,
        )
    except NotificationCreationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No se pudo crear la notificación",
        ) from exc
    return _notification_to_schema(notification)


@router.post("/test", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def send_test_notification(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Send a test notification to the authenticated user."""

    sent_at = now_in_app_timezone().strftime("%Y-%m-%d %H:%M")
    notification = notify_user(
        db,
        user_id=current_user.id,
        notification_type=NOTIFICATION_TYPE_TEST,
        title="Notificación de prueba",
        message=f"Esta es una notificación de prueba generada el {sent_at}",
    )
    logger.info("Test notification sent to user %s", current_user.id)
    return _notification_to_schema(notification)


@router.post("/check-due", response_model=EntitlementCheckRead)
def check_due_entitlements(
    scheduler: EntitlementScheduler = Depends(get_entitlement_scheduler),
    current_user: User = Depends(require_admin),
) -> EntitlementCheckRead:
    """Run the allowance, promotion and retirement check right away."""

    logger.info("Entitlement check requested by user %s", current_user.id)
    try:
        summary = scheduler.run_now()
    except PassError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_CHECK_FAILED_MESSAGE,
        ) from exc
    except Exception as exc:
        logger.exception("On-demand entitlement check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_CHECK_FAILED_MESSAGE,
        ) from exc
    return EntitlementCheckRead(
        success=True,
        message="Se revisaron los incrementos y ascensos pendientes",
        **summary.as_dict(),
    )


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Delete a notification."""

    try:
        delete_notification_uc(db, notification_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
