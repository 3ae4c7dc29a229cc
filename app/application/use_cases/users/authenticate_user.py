"""Use case for authenticating a user."""

from enum import Enum, auto
from typing import NamedTuple

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()
    MUST_CHANGE_PASSWORD = auto()


class AuthenticationResult(NamedTuple):
    user: User | None
    status: AuthenticationStatus


def authenticate_user(session: Session, email: str, password: str) -> AuthenticationResult:
    """Check the credentials of ``email``.

    Deleted users and wrong passwords are reported the same way so the
    response does not reveal which accounts exist.
    """

    user = UserRepository(session).get_by_email(email.strip())

    if user is None or user.deleted or not verify_password(password, user.password):
        return AuthenticationResult(None, AuthenticationStatus.INVALID_CREDENTIALS)

    if not user.is_active:
        return AuthenticationResult(user, AuthenticationStatus.INACTIVE)

    if user.must_change_password:
        return AuthenticationResult(user, AuthenticationStatus.MUST_CHANGE_PASSWORD)

    return AuthenticationResult(user, AuthenticationStatus.SUCCESS)
