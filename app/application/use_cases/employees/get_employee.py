"""Use case for retrieving a single employee."""

from sqlalchemy.orm import Session

from app.domain.entities import Employee
from app.infrastructure.repositories import EmployeeRepository


def get_employee(session: Session, employee_id: int) -> Employee:
    """Return the requested employee or raise an error if it does not exist."""

    employee = EmployeeRepository(session).get(employee_id)
    if employee is None:
        raise ValueError("Empleado no encontrado")
    return employee
