"""Aggregate application use cases."""

from .entitlements.check_due import check_due_entitlements, run_entitlement_check
from .users import authenticate_user, create_user, record_login

__all__ = [
    "authenticate_user",
    "check_due_entitlements",
    "create_user",
    "record_login",
    "run_entitlement_check",
]
