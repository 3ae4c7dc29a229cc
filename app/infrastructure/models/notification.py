"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications.

    ``due_date`` is only set for entitlement notifications. Together with the
    related entity, the type and the recipient it forms the key that keeps the
    scheduler from notifying the same entitlement twice.
    """

    __tablename__ = "notification"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "related_type",
            "related_id",
            "type",
            "due_date",
            name="uq_notification_entitlement",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    type = Column(String(50), nullable=False, index=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    read_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    related_id = Column(Integer, nullable=True, index=True)
    related_type = Column(String(50), nullable=True)
    due_date = Column(Date, nullable=True)


__all__ = ["NotificationModel"]
