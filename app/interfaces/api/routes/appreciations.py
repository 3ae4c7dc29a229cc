"""Rutas para agradecimientos y sanciones disciplinarias."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.appreciations import (
    NOT_FOUND_MESSAGE,
    create_appreciation,
    delete_appreciation,
    get_appreciation,
    list_appreciations,
    update_appreciation,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_staff
from app.interfaces.api.schemas import (
    AppreciationCreate,
    AppreciationRead,
    AppreciationUpdate,
)

router = APIRouter(prefix="/appreciations", tags=["appreciations"])


def _status_for(exc: ValueError) -> int:
    if str(exc) in {NOT_FOUND_MESSAGE, "Empleado no encontrado"}:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


@router.get("/", response_model=list[AppreciationRead])
def list_appreciation_records(
    employee_id: int | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista los registros, opcionalmente filtrados por empleado."""

    records = list_appreciations(db, employee_id=employee_id)
    return [AppreciationRead.model_validate(record) for record in records]


@router.post("/", response_model=AppreciationRead, status_code=status.HTTP_201_CREATED)
def create_appreciation_record(
    record_in: AppreciationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Registra un agradecimiento o una sanción para un empleado.

    Las cartas de agradecimiento ministeriales y del director general suman
    meses de servicio cuando no se indica otra cantidad.
    """

    try:
        record = create_appreciation(
            db,
            employee_id=record_in.employee_id,
            appreciation_type=record_in.type,
            description=record_in.description,
            issued_on=record_in.issued_on,
            issued_by=record_in.issued_by,
            additional_service_months=record_in.additional_service_months,
        )
    except ValueError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
    return AppreciationRead.model_validate(record)


@router.get("/{appreciation_id}", response_model=AppreciationRead)
def read_appreciation_record(
    appreciation_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        record = get_appreciation(db, appreciation_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return AppreciationRead.model_validate(record)


@router.put("/{appreciation_id}", response_model=AppreciationRead)
def update_appreciation_record(
    appreciation_id: int,
    record_in: AppreciationUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    try:
        record = update_appreciation(
            db,
            appreciation_id=appreciation_id,
            **record_in.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
    return AppreciationRead.model_validate(record)


@router.delete("/{appreciation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appreciation_record(
    appreciation_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    try:
        delete_appreciation(db, appreciation_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
