"""Use cases for managing users."""

from .authenticate_user import (
    AuthenticationResult,
    AuthenticationStatus,
    authenticate_user,
)
from .create_user import create_user
from .delete_user import delete_user
from .get_user import get_user
from .list_users import list_users
from .record_login import record_login
from .update_user import update_user

__all__ = [
    "AuthenticationResult",
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "delete_user",
    "get_user",
    "list_users",
    "record_login",
    "update_user",
]
