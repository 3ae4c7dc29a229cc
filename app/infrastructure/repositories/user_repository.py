"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.domain.entities import ADMINISTRATIVE_ROLE_ALIASES, Role, User
from app.infrastructure.models import RoleModel, UserModel
from app.utils import now_in_app_naive_datetime


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.deleted.is_(False))
            .order_by(UserModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_admins(
        self, aliases: Iterable[str] = ADMINISTRATIVE_ROLE_ALIASES
    ) -> Sequence[User]:
        """Return active users whose role grants administrative capability."""

        normalized = sorted({alias.lower() for alias in aliases})
        query = (
            self.session.query(UserModel)
            .join(RoleModel, UserModel.role_id == RoleModel.id)
            .options(joinedload(UserModel.role))
            .filter(UserModel.deleted.is_(False))
            .filter(UserModel.is_active.is_(True))
            .filter(func.lower(RoleModel.alias).in_(normalized))
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        if model.role is None:
            self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        # The joined role is stale when ``role_id`` changed in this update.
        self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def delete(self, user_id: int, *, deleted_by: int | None = None) -> None:
        model = self._get_model(id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)

        if model.deleted:
            return

        now = now_in_app_naive_datetime()
        model.deleted = True
        model.deleted_by = deleted_by
        model.deleted_at = now
        model.is_active = False
        model.updated_by = deleted_by
        model.updated_at = now
        self.session.add(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            name=model.name,
            email=model.email,
            password=model.password,
            must_change_password=model.must_change_password,
            last_login=model.last_login,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_by=model.updated_by,
            updated_at=model.updated_at,
            is_active=model.is_active,
            deleted=model.deleted,
            deleted_by=model.deleted_by,
            deleted_at=model.deleted_at,
        )

    def _get_model(self, include_deleted: bool = False, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        if not include_deleted:
            query = query.filter(UserModel.deleted.is_(False))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_by = user.created_by
            model.created_at = user.created_at
        model.role_id = user.role.id
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.must_change_password = user.must_change_password
        model.last_login = user.last_login
        if not include_creation_fields:
            model.updated_by = user.updated_by
            model.updated_at = user.updated_at
        model.is_active = user.is_active
        model.deleted = user.deleted
        model.deleted_by = user.deleted_by
        model.deleted_at = user.deleted_at

    @staticmethod
    def _role_to_entity(model_role) -> Role:
        if model_role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return Role(id=model_role.id, name=model_role.name, alias=model_role.alias)


__all__ = ["UserRepository"]
