"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_in_app_naive_datetime


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_id: int | None = None,
    role_alias: str | None = None,
    must_change_password: bool = False,
    created_by: int | None = None,
) -> User:
    """Create a new user ensuring unique email addresses.

    The role is looked up by ``role_id`` or, failing that, by ``role_alias``.
    """

    repository = UserRepository(session)
    role_repository = RoleRepository(session)

    if repository.get_by_email(email):
        msg = "El correo electrónico ya está registrado"
        raise ValueError(msg)

    if role_id is not None:
        role = role_repository.get(role_id)
    elif role_alias:
        role = role_repository.get_by_alias(role_alias)
    else:
        role = None
    if role is None:
        raise ValueError("Rol no encontrado")

    user = User(
        id=None,
        role=role,
        name=name,
        email=email,
        password=get_password_hash(password),
        must_change_password=must_change_password,
        last_login=None,
        created_by=created_by,
        created_at=now_in_app_naive_datetime(),
        updated_by=None,
        updated_at=None,
        is_active=True,
    )

    return repository.create(user)
