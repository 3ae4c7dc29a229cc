"""Domain entity representing an employee record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

EMPLOYEE_STATUS_ACTIVE = "active"


@dataclass
class Employee:
    """Core attributes describing an employee.

    ``hiring_date`` and ``retirement_date`` are normally :class:`date` values.
    When the stored text is not a valid date it is kept as is and the
    entitlement calculator rejects it for that employee alone.
    """

    id: int | None
    employee_number: str
    first_name: str
    last_name: str
    hiring_date: date | str | None
    current_grade: int
    email: str | None = None
    phone_number: str | None = None
    date_of_birth: date | None = None
    last_promotion_date: date | None = None
    last_allowance_date: date | None = None
    status: str = EMPLOYEE_STATUS_ACTIVE
    retirement_date: date | str | None = None
    workplace_id: int | None = None
    job_title_id: int | None = None
    educational_qualification_id: int | None = None
    full_name: str = ""

    def __post_init__(self) -> None:
        if not self.full_name:
            self.full_name = build_full_name(self.first_name, self.last_name)


def build_full_name(first_name: str, last_name: str) -> str:
    """Return the display name composed from the first and last names."""

    return " ".join(part.strip() for part in (first_name, last_name) if part and part.strip())


__all__ = ["Employee", "EMPLOYEE_STATUS_ACTIVE", "build_full_name"]
