"""Rutas para consultar y administrar empleados."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.allowance_promotions import list_orders
from app.application.use_cases.appreciations import list_appreciations
from app.application.use_cases.employees import (
    create_employee as create_employee_uc,
    delete_employee as delete_employee_uc,
    get_employee as get_employee_uc,
    list_employees as list_employees_uc,
    update_employee as update_employee_uc,
)
from app.application.use_cases.entitlements.check_due import employee_entitlement_dates
from app.domain.entities import Employee, EntitlementKind, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_staff
from app.interfaces.api.schemas import (
    AllowancePromotionRead,
    AppreciationRead,
    EmployeeCreate,
    EmployeeEntitlementsRead,
    EmployeeRead,
    EmployeeUpdate,
)
from app.utils import today_in_app_timezone

router = APIRouter(prefix="/employees", tags=["employees"])


def _to_read_model(employee: Employee) -> EmployeeRead:
    return EmployeeRead.model_validate(employee)


def _get_or_404(db: Session, employee_id: int) -> Employee:
    try:
        return get_employee_uc(db, employee_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/", response_model=list[EmployeeRead])
def list_employees(
    skip: int = 0,
    limit: int = 100,
    status_filter: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Devuelve la lista de empleados."""

    employees = list_employees_uc(db, skip=skip, limit=limit, status=status_filter)
    return [_to_read_model(employee) for employee in employees]


@router.post("/", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: EmployeeCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Registra un nuevo empleado."""

    try:
        employee = create_employee_uc(db, **employee_in.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(employee)


@router.get("/{employee_id}", response_model=EmployeeRead)
def read_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Obtiene al empleado identificado por ``employee_id``."""

    return _to_read_model(_get_or_404(db, employee_id))


@router.get("/{employee_id}/entitlements", response_model=EmployeeEntitlementsRead)
def read_employee_entitlements(
    employee_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Calcula las próximas fechas de incremento, ascenso y jubilación."""

    employee = _get_or_404(db, employee_id)
    today = today_in_app_timezone()
    dates = employee_entitlement_dates(employee, today=today)
    return EmployeeEntitlementsRead(
        employee_id=employee_id,
        checked_on=today,
        next_allowance_date=dates[EntitlementKind.ALLOWANCE.value],
        next_promotion_date=dates[EntitlementKind.PROMOTION.value],
        retirement_date=dates[EntitlementKind.RETIREMENT.value],
    )


@router.get("/{employee_id}/appreciations", response_model=list[AppreciationRead])
def read_employee_appreciations(
    employee_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista los agradecimientos y sanciones del empleado."""

    _get_or_404(db, employee_id)
    records = list_appreciations(db, employee_id=employee_id)
    return [AppreciationRead.model_validate(record) for record in records]


@router.get("/{employee_id}/allowance-promotions", response_model=list[AllowancePromotionRead])
def read_employee_allowance_promotions(
    employee_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista el historial de incrementos y ascensos del empleado."""

    _get_or_404(db, employee_id)
    orders = list_orders(db, employee_id=employee_id)
    return [AllowancePromotionRead.model_validate(order) for order in orders]

@router.put("/{employee_id}", response_model=EmployeeRead)
def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Actualiza los datos de un empleado."""

    try:
        employee = update_employee_uc(
            db, employee_id=employee_id, **employee_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == "Empleado no encontrado":
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return _to_read_model(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
):
    """Elimina al empleado indicado."""

    try:
        delete_employee_uc(db, employee_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
