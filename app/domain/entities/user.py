"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


from .role import ROLE_ADMIN, ROLE_MANAGER, Role

ADMINISTRATIVE_ROLE_ALIASES = frozenset({ROLE_ADMIN, ROLE_MANAGER})


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    must_change_password: bool
    last_login: datetime | None
    created_by: int | None
    created_at: datetime | None
    updated_by: int | None
    updated_at: datetime | None
    is_active: bool
    deleted: bool = False
    deleted_by: int | None = None
    deleted_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.matches(alias)

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def is_staff(self) -> bool:
        """Return ``True`` for users allowed to manage HR records."""

        return self.role.alias.lower() in ADMINISTRATIVE_ROLE_ALIASES


__all__ = ["User", "ADMINISTRATIVE_ROLE_ALIASES"]
