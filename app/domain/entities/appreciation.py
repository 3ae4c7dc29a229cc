"""Domain entity for appreciation and disciplinary records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

APPRECIATION_TYPE_APPRECIATION = "appreciation"
APPRECIATION_TYPE_DISCIPLINARY = "disciplinary"
APPRECIATION_TYPES = frozenset(
    {APPRECIATION_TYPE_APPRECIATION, APPRECIATION_TYPE_DISCIPLINARY}
)

# Letters of thanks that grant extra months of service when none are given.
SERVICE_MONTHS_BY_LETTER: tuple[tuple[str, int], ...] = (
    ("carta de agradecimiento ministerial", 6),
    ("carta de agradecimiento del director general", 1),
)


@dataclass
class Appreciation:
    """Letter of thanks or disciplinary sanction recorded for an employee."""

    id: int | None
    employee_id: int
    type: str
    description: str
    issued_on: date
    issued_by: str
    additional_service_months: int = 0

    def is_disciplinary(self) -> bool:
        return self.type == APPRECIATION_TYPE_DISCIPLINARY


__all__ = [
    "Appreciation",
    "APPRECIATION_TYPE_APPRECIATION",
    "APPRECIATION_TYPE_DISCIPLINARY",
    "APPRECIATION_TYPES",
    "SERVICE_MONTHS_BY_LETTER",
]
