"""Errors raised while computing and notifying employee entitlements."""

from __future__ import annotations


class EntitlementError(Exception):
    """Base class for entitlement scheduling failures."""


class DateComputationError(EntitlementError, ValueError):
    """A due date could not be computed from the employee's stored dates."""


class NotificationCreationError(EntitlementError):
    """Persisting a notification for one recipient failed."""

    def __init__(self, message: str, *, user_id: int | None = None) -> None:
        super().__init__(message)
        self.user_id = user_id


class PassError(EntitlementError):
    """A whole entitlement check pass could not complete."""


__all__ = [
    "EntitlementError",
    "DateComputationError",
    "NotificationCreationError",
    "PassError",
]
