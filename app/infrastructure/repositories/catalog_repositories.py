"""Persistence layer for the workplace, job title and qualification catalogues."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict
from typing import Any, Generic, TypeVar

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.domain.entities import EducationalQualification, JobTitle, Workplace
from app.infrastructure.models import (
    EducationalQualificationModel,
    EmployeeModel,
    JobTitleModel,
    WorkplaceModel,
)

EntityT = TypeVar("EntityT", Workplace, JobTitle, EducationalQualification)


class CatalogRepository(Generic[EntityT]):
    """CRUD operations shared by every catalogue.

    Subclasses name the model, the entity, the ordering column and the
    employee column that references the catalogue. Entity and model
    attributes have the same names.
    """

    model: Any
    entity: type
    order_by: str = "id"
    employee_column: str

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[EntityT]:
        query = self.session.query(self.model).order_by(
            getattr(self.model, self.order_by), self.model.id
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, entry_id: int) -> EntityT | None:
        model = self.session.get(self.model, entry_id)
        return self._to_entity(model) if model else None

    def create(self, entry: EntityT) -> EntityT:
        model = self.model()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, entry: EntityT) -> EntityT:
        model = self.session.get(self.model, entry.id)
        if model is None:
            msg = f"{self.entity.__name__} with id {entry.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, entry_id: int) -> bool:
        model = self.session.get(self.model, entry_id)
        if model is None:
            return False
        # Employees keep their record when a catalogue entry goes away.
        column = getattr(EmployeeModel, self.employee_column)
        self.session.execute(
            update(EmployeeModel).where(column == entry_id).values({column: None})
        )
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: Any, entry: EntityT) -> None:
        for field, value in asdict(entry).items():
            if field != "id":
                setattr(model, field, value)

    def _to_entity(self, model: Any) -> EntityT:
        fields = self.entity.__dataclass_fields__
        return self.entity(**{field: getattr(model, field) for field in fields})


class WorkplaceRepository(CatalogRepository[Workplace]):
    model = WorkplaceModel
    entity = Workplace
    order_by = "name"
    employee_column = "workplace_id"


class JobTitleRepository(CatalogRepository[JobTitle]):
    model = JobTitleModel
    entity = JobTitle
    order_by = "grade"
    employee_column = "job_title_id"


class EducationalQualificationRepository(CatalogRepository[EducationalQualification]):
    model = EducationalQualificationModel
    entity = EducationalQualification
    order_by = "level"
    employee_column = "educational_qualification_id"


__all__ = [
    "CatalogRepository",
    "EducationalQualificationRepository",
    "JobTitleRepository",
    "WorkplaceRepository",
]
