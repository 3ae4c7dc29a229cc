"""Use case for deleting an employee."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import EmployeeRepository


def delete_employee(session: Session, employee_id: int) -> None:
    repository = EmployeeRepository(session)
    if repository.get(employee_id) is None:
        raise ValueError("Empleado no encontrado")
    repository.delete(employee_id)
