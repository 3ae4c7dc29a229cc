"""Rutas para administrar usuarios y sus credenciales."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_admin
from app.interfaces.api.schemas import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Crea un nuevo usuario con credenciales de acceso a la API."""

    try:
        user = create_user_uc(
            db,
            name=user_in.name,
            role_id=user_in.role_id,
            email=user_in.email,
            password=user_in.password,
            must_change_password=user_in.must_change_password,
            created_by=current_user.id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("Usuario %s creado por %s", user.id, current_user.id)
    return _to_read_model(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Devuelve la información del usuario autenticado."""

    return _to_read_model(current_user)


@router.get("/", response_model=list[UserRead])
def list_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Devuelve una lista de usuarios registrados."""

    return [_to_read_model(user) for user in list_users_uc(db, skip=skip, limit=limit)]


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Obtiene al usuario identificado por ``user_id``."""

    try:
        user = get_user_uc(db, user_id, include_inactive=True)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Actualiza los datos de un usuario existente."""

    update_data = user_in.model_dump(exclude_unset=True)
    acting_on_self = user_id == current_user.id

    if not current_user.is_admin():
        if not acting_on_self:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="No autorizado")
        forbidden = {"email", "role_id", "is_active"} & set(update_data)
        if forbidden:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="No puede modificar su correo, rol o estado",
            )

    password = update_data.get("password")
    try:
        user = update_user_uc(
            db,
            user_id=user_id,
            name=update_data.get("name"),
            email=update_data.get("email"),
            is_active=update_data.get("is_active"),
            role_id=update_data.get("role_id"),
            password=password,
            must_change_password=False if password and acting_on_self else None,
            updated_by=current_user.id,
        )
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == "Usuario no encontrado":
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return _to_read_model(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Elimina al usuario indicado."""

    try:
        delete_user_uc(db, user_id, deleted_by=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
