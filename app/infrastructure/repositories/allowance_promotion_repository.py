"""Persistence layer for allowance and promotion orders."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AllowancePromotion
from app.infrastructure.models import AllowancePromotionModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class AllowancePromotionRepository:
    """Provide CRUD operations for :class:`AllowancePromotion` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        employee_id: int | None = None,
        status: str | None = None,
    ) -> Sequence[AllowancePromotion]:
        query = self.session.query(AllowancePromotionModel)
        if employee_id is not None:
            query = query.filter(AllowancePromotionModel.employee_id == employee_id)
        if status:
            query = query.filter(AllowancePromotionModel.status == status)
        query = query.order_by(
            AllowancePromotionModel.due_date, AllowancePromotionModel.id
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, order_id: int) -> AllowancePromotion | None:
        model = self.session.get(AllowancePromotionModel, order_id)
        return self._to_entity(model) if model else None

    def create(self, order: AllowancePromotion) -> AllowancePromotion:
        model = AllowancePromotionModel()
        self._apply_entity_to_model(model, order)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, order: AllowancePromotion) -> AllowancePromotion:
        model = self.session.get(AllowancePromotionModel, order.id)
        if model is None:
            msg = f"Order with id {order.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, order)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, order_id: int) -> bool:
        model = self.session.get(AllowancePromotionModel, order_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(
        model: AllowancePromotionModel, order: AllowancePromotion
    ) -> None:
        model.employee_id = order.employee_id
        model.type = order.type
        model.due_date = order.due_date
        model.status = order.status
        model.notes = order.notes
        model.processed_at = ensure_app_naive_datetime(order.processed_at)
        model.processed_by = order.processed_by

    @staticmethod
    def _to_entity(model: AllowancePromotionModel) -> AllowancePromotion:
        return AllowancePromotion(
            id=model.id,
            employee_id=model.employee_id,
            type=model.type,
            due_date=model.due_date,
            status=model.status,
            notes=model.notes,
            processed_at=ensure_app_timezone(model.processed_at),
            processed_by=model.processed_by,
        )


__all__ = ["AllowancePromotionRepository"]
