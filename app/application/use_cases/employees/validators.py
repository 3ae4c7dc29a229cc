"""Common validation helpers for employee use cases."""

from datetime import date


def ensure_valid_grade(grade: int) -> int:
    """Return ``grade`` or raise ``ValueError`` when it is not positive."""

    if grade < 1:
        raise ValueError("El grado debe ser un entero positivo")
    return grade


def ensure_valid_dates(
    *,
    hiring_date: date,
    date_of_birth: date | None = None,
    retirement_date: date | None = None,
) -> None:
    """Raise ``ValueError`` when the employee's dates are inconsistent."""

    if date_of_birth is not None and date_of_birth >= hiring_date:
        raise ValueError("La fecha de nacimiento debe ser anterior a la fecha de ingreso")
    if retirement_date is not None and retirement_date < hiring_date:
        raise ValueError("La fecha de jubilación no puede ser anterior a la fecha de ingreso")
