"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    ("Administrador", "admin"),
    ("Gerente", "manager"),
    ("Usuario", "user"),
)


def _engine_options(database_url: str) -> dict[str, Any]:
    """Return engine keyword arguments suited to the configured backend."""

    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # Every connection to an in-memory SQLite database is a new database.
        options["poolclass"] = StaticPool
    return options


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed_default_roles(session: Session) -> None:
    """Insert the default roles that are missing from the ``role`` table."""

    from app.infrastructure.models import RoleModel

    existing = {alias.lower() for (alias,) in session.query(RoleModel.alias).all()}
    missing = [(name, alias) for name, alias in DEFAULT_ROLES if alias not in existing]
    if not missing:
        return
    for name, alias in missing:
        session.add(RoleModel(name=name, alias=alias))
    session.commit()
    logger.info("Seeded default roles: %s", ", ".join(alias for _, alias in missing))


def initialize_database() -> None:
    """Ensure all ORM models have tables and the default roles exist."""

    from app.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    with SessionLocal() as session:
        seed_default_roles(session)


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
