"""Domain entity representing a user role."""

from dataclasses import dataclass

ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLE_USER = "user"


@dataclass
class Role:
    """Role assigned to a user; ``alias`` is what permissions are checked on."""

    id: int
    name: str
    alias: str

    def matches(self, alias: str) -> bool:
        return self.alias.lower() == alias.lower()


__all__ = ["Role", "ROLE_ADMIN", "ROLE_MANAGER", "ROLE_USER"]
