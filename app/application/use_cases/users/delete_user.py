"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import UserRepository


def delete_user(session: Session, user_id: int, *, deleted_by: int | None = None) -> None:
    """Soft delete the specified user."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("Usuario no encontrado")
    repository.delete(user_id, deleted_by=deleted_by)
