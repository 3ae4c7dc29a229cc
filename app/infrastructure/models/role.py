"""SQLAlchemy model for user roles."""

from sqlalchemy import Column, Integer, String

from app.infrastructure.database import Base


class RoleModel(Base):
    """Role catalogue; ``admin``, ``manager`` and ``user`` are seeded on start-up."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True)
    alias = Column(String(30), nullable=False, unique=True, index=True)


__all__ = ["RoleModel"]
