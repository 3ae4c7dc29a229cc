"""Persistence layer for employee records."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy import String, cast
from sqlalchemy.orm import Session

from app.domain.entities import Employee, build_full_name
from app.infrastructure.models import EmployeeModel


def _stored_date(raw: str | None) -> date | str | None:
    """Return ``raw`` as a date when it is one, otherwise the text as stored."""

    if raw is None:
        return None
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return raw


class EmployeeRepository:
    """Provide CRUD operations for :class:`Employee` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_entitlement_check(self) -> Sequence[Employee]:
        """Return every employee with the fields the entitlement check reads.

        Hiring and retirement dates are selected as text so that a malformed
        value reaches the calculator for that employee instead of failing the
        whole query.
        """

        rows = (
            self.session.query(
                EmployeeModel.id,
                EmployeeModel.employee_number,
                EmployeeModel.first_name,
                EmployeeModel.last_name,
                EmployeeModel.full_name,
                EmployeeModel.current_grade,
                EmployeeModel.status,
                cast(EmployeeModel.hiring_date, String).label("hiring_date"),
                cast(EmployeeModel.retirement_date, String).label("retirement_date"),
            )
            .order_by(EmployeeModel.id)
            .all()
        )
        return [
            Employee(
                id=row.id,
                employee_number=row.employee_number,
                first_name=row.first_name,
                last_name=row.last_name,
                full_name=row.full_name,
                current_grade=row.current_grade,
                status=row.status,
                hiring_date=_stored_date(row.hiring_date),
                retirement_date=_stored_date(row.retirement_date),
            )
            for row in rows
        ]

    def list(
        self,
        *,
        skip: int = 0,
        limit: int = 100,
        status: str | None = None,
    ) -> Sequence[Employee]:
        query = self.session.query(EmployeeModel)
        if status:
            query = query.filter(EmployeeModel.status == status)
        query = query.order_by(EmployeeModel.full_name, EmployeeModel.id)
        return [self._to_entity(model) for model in query.offset(skip).limit(limit).all()]

    def get(self, employee_id: int) -> Employee | None:
        model = self.session.get(EmployeeModel, employee_id)
        return self._to_entity(model) if model else None

    def get_by_number(self, employee_number: str) -> Employee | None:
        model = (
            self.session.query(EmployeeModel)
            .filter(EmployeeModel.employee_number == employee_number)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, employee: Employee) -> Employee:
        model = EmployeeModel()
        self._apply_entity_to_model(model, employee)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, employee: Employee) -> Employee:
        model = self.session.get(EmployeeModel, employee.id)
        if model is None:
            msg = f"Employee with id {employee.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, employee)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, employee_id: int) -> None:
        model = self.session.get(EmployeeModel, employee_id)
        if model is None:
            msg = f"Employee with id {employee_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: EmployeeModel, employee: Employee) -> None:
        model.employee_number = employee.employee_number
        model.first_name = employee.first_name
        model.last_name = employee.last_name
        model.full_name = build_full_name(employee.first_name, employee.last_name)
        model.email = employee.email
        model.phone_number = employee.phone_number
        model.date_of_birth = employee.date_of_birth
        model.hiring_date = employee.hiring_date
        model.current_grade = employee.current_grade
        model.last_promotion_date = employee.last_promotion_date
        model.last_allowance_date = employee.last_allowance_date
        model.status = employee.status
        model.retirement_date = employee.retirement_date
        model.workplace_id = employee.workplace_id
        model.job_title_id = employee.job_title_id
        model.educational_qualification_id = employee.educational_qualification_id

    @staticmethod
    def _to_entity(model: EmployeeModel) -> Employee:
        return Employee(
            id=model.id,
            employee_number=model.employee_number,
            first_name=model.first_name,
            last_name=model.last_name,
            full_name=model.full_name,
            email=model.email,
            phone_number=model.phone_number,
            date_of_birth=model.date_of_birth,
            hiring_date=model.hiring_date,
            current_grade=model.current_grade,
            last_promotion_date=model.last_promotion_date,
            last_allowance_date=model.last_allowance_date,
            status=model.status,
            retirement_date=model.retirement_date,
            workplace_id=model.workplace_id,
            job_title_id=model.job_title_id,
            educational_qualification_id=model.educational_qualification_id,
        )


__all__ = ["EmployeeRepository"]
