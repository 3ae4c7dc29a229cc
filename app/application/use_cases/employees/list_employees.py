"""Use case for listing employees."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Employee
from app.infrastructure.repositories import EmployeeRepository


def list_employees(
    session: Session,
    *,
    skip: int = 0,
    limit: int = 100,
    status: str | None = None,
) -> Sequence[Employee]:
    return EmployeeRepository(session).list(skip=skip, limit=limit, status=status)
