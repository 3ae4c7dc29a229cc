"""Persistence layer for appreciation and disciplinary records."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Appreciation
from app.infrastructure.models import AppreciationModel


class AppreciationRepository:
    """Provide CRUD operations for :class:`Appreciation` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, employee_id: int | None = None) -> Sequence[Appreciation]:
        query = self.session.query(AppreciationModel)
        if employee_id is not None:
            query = query.filter(AppreciationModel.employee_id == employee_id)
        query = query.order_by(AppreciationModel.issued_on.desc(), AppreciationModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, appreciation_id: int) -> Appreciation | None:
        model = self.session.get(AppreciationModel, appreciation_id)
        return self._to_entity(model) if model else None

    def create(self, appreciation: Appreciation) -> Appreciation:
        model = AppreciationModel()
        self._apply_entity_to_model(model, appreciation)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, appreciation: Appreciation) -> Appreciation:
        model = self.session.get(AppreciationModel, appreciation.id)
        if model is None:
            msg = f"Appreciation with id {appreciation.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, appreciation)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, appreciation_id: int) -> bool:
        model = self.session.get(AppreciationModel, appreciation_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: AppreciationModel, appreciation: Appreciation) -> None:
        model.employee_id = appreciation.employee_id
        model.type = appreciation.type
        model.description = appreciation.description
        model.issued_on = appreciation.issued_on
        model.issued_by = appreciation.issued_by
        model.additional_service_months = appreciation.additional_service_months

    @staticmethod
    def _to_entity(model: AppreciationModel) -> Appreciation:
        return Appreciation(
            id=model.id,
            employee_id=model.employee_id,
            type=model.type,
            description=model.description,
            issued_on=model.issued_on,
            issued_by=model.issued_by,
            additional_service_months=model.additional_service_months or 0,
        )


__all__ = ["AppreciationRepository"]
