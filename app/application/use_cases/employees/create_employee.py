"""Use case for registering employees."""

from datetime import date

from sqlalchemy.orm import Session

from app.application.use_cases.catalogs import ensure_references_exist
from app.domain.entities import EMPLOYEE_STATUS_ACTIVE, Employee
from app.infrastructure.repositories import EmployeeRepository

from .validators import ensure_valid_dates, ensure_valid_grade


def create_employee(
    session: Session,
    *,
    employee_number: str,
    first_name: str,
    last_name: str,
    hiring_date: date,
    current_grade: int,
    email: str | None = None,
    phone_number: str | None = None,
    date_of_birth: date | None = None,
    last_promotion_date: date | None = None,
    last_allowance_date: date | None = None,
    status: str = EMPLOYEE_STATUS_ACTIVE,
    retirement_date: date | None = None,
    workplace_id: int | None = None,
    job_title_id: int | None = None,
    educational_qualification_id: int | None = None,
) -> Employee:
    """Create an employee ensuring the employee number is unique."""

    repository = EmployeeRepository(session)
    if repository.get_by_number(employee_number):
        raise ValueError("El número de empleado ya está registrado")

    ensure_valid_grade(current_grade)
    ensure_valid_dates(
        hiring_date=hiring_date,
        date_of_birth=date_of_birth,
        retirement_date=retirement_date,
    )
    ensure_references_exist(
        session,
        workplace_id=workplace_id,
        job_title_id=job_title_id,
        educational_qualification_id=educational_qualification_id,
    )

    employee = Employee(
        id=None,
        employee_number=employee_number,
        first_name=first_name,
        last_name=last_name,
        hiring_date=hiring_date,
        current_grade=current_grade,
        email=email,
        phone_number=phone_number,
        date_of_birth=date_of_birth,
        last_promotion_date=last_promotion_date,
        last_allowance_date=last_allowance_date,
        status=status,
        retirement_date=retirement_date,
        workplace_id=workplace_id,
        job_title_id=job_title_id,
        educational_qualification_id=educational_qualification_id,
    )
    return repository.create(employee)
