"""Rutas para las órdenes de incremento salarial y ascenso."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.allowance_promotions import (
    NOT_FOUND_MESSAGE,
    create_order,
    delete_order,
    get_order,
    list_orders,
    list_pending_orders,
    process_order,
    update_order,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_staff
from app.interfaces.api.schemas import (
    AllowancePromotionCreate,
    AllowancePromotionProcess,
    AllowancePromotionRead,
    AllowancePromotionUpdate,
)

router = APIRouter(prefix="/allowance-promotions", tags=["allowance-promotions"])


@router.get("/", response_model=list[AllowancePromotionRead])
def list_allowance_promotions(
    employee_id: int | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista las órdenes, opcionalmente filtradas por empleado o estado."""

    try:
        orders = list_orders(db, employee_id=employee_id, status=status_filter)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [AllowancePromotionRead.model_validate(order) for order in orders]


@router.get("/pending", response_model=list[AllowancePromotionRead])
def list_pending_allowance_promotions(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista las órdenes que aún esperan una decisión."""

    return [AllowancePromotionRead.model_validate(order) for order in list_pending_orders(db)]


@router.get("/{order_id}", response_model=AllowancePromotionRead)
def read_allowance_promotion(
    order_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        order = get_order(db, order_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return AllowancePromotionRead.model_validate(order)


@router.post("/", response_model=AllowancePromotionRead, status_code=status.HTTP_201_CREATED)
def create_allowance_promotion(
    order_in: AllowancePromotionCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Registra una orden pendiente para un empleado."""

    try:
        order = create_order(
            db,
            employee_id=order_in.employee_id,
            order_type=order_in.type,
            due_date=order_in.due_date,
            notes=order_in.notes,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return AllowancePromotionRead.model_validate(order)


@router.put("/{order_id}", response_model=AllowancePromotionRead)
def update_allowance_promotion(
    order_id: int,
    order_in: AllowancePromotionUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Modifica el tipo, la fecha o las notas de una orden pendiente."""

    try:
        order = update_order(db, order_id=order_id, **order_in.model_dump(exclude_unset=True))
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == NOT_FOUND_MESSAGE:
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return AllowancePromotionRead.model_validate(order)


@router.put("/{order_id}/process", response_model=AllowancePromotionRead)
def process_allowance_promotion(
    order_id: int,
    decision: AllowancePromotionProcess,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    """Marca la orden como completada o rechazada."""

    try:
        order = process_order(
            db,
            order_id=order_id,
            status=decision.status,
            notes=decision.notes,
            processed_by=current_user.id,
        )
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == NOT_FOUND_MESSAGE:
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return AllowancePromotionRead.model_validate(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_allowance_promotion(
    order_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Elimina la orden indicada."""

    try:
        delete_order(db, order_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
