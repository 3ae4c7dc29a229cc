"""Rutas para los catálogos de lugares de trabajo, cargos y titulaciones."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.application.use_cases.catalogs import (
    CATALOG_JOB_TITLES,
    CATALOG_QUALIFICATIONS,
    CATALOG_WORKPLACES,
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    not_found_message,
    update_entry,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_staff
from app.interfaces.api.schemas import (
    EducationalQualificationCreate,
    EducationalQualificationRead,
    EducationalQualificationUpdate,
    JobTitleCreate,
    JobTitleRead,
    JobTitleUpdate,
    WorkplaceCreate,
    WorkplaceRead,
    WorkplaceUpdate,
)


def _build_router(
    catalog: str,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
) -> APIRouter:
    """Build the CRUD router for one catalogue mounted under ``/{catalog}``."""

    router = APIRouter(prefix=f"/{catalog}", tags=[catalog])

    def _error(exc: ValueError) -> HTTPException:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == not_found_message(catalog):
            status_code = status.HTTP_404_NOT_FOUND
        return HTTPException(status_code=status_code, detail=str(exc))

    @router.get("/", response_model=list[read_schema])
    def list_catalog_entries(
        db: Session = Depends(get_db),
        _: User = Depends(get_current_active_user),
    ):
        return [read_schema.model_validate(entry) for entry in list_entries(db, catalog)]

    @router.post("/", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    def create_catalog_entry(
        entry_in: create_schema,
        db: Session = Depends(get_db),
        _: User = Depends(require_staff),
    ):
        try:
            entry = create_entry(db, catalog, **entry_in.model_dump())
        except ValueError as exc:
            raise _error(exc) from exc
        return read_schema.model_validate(entry)

    @router.get("/{entry_id}", response_model=read_schema)
    def read_catalog_entry(
        entry_id: int,
        db: Session = Depends(get_db),
        _: User = Depends(get_current_active_user),
    ):
        try:
            entry = get_entry(db, catalog, entry_id)
        except ValueError as exc:
            raise _error(exc) from exc
        return read_schema.model_validate(entry)

    @router.put("/{entry_id}", response_model=read_schema)
    def update_catalog_entry(
        entry_id: int,
        entry_in: update_schema,
        db: Session = Depends(get_db),
        _: User = Depends(require_staff),
    ):
        changes = {
            field: value
            for field, value in entry_in.model_dump(exclude_unset=True).items()
            if value is not None or field == "description"
        }
        try:
            entry = update_entry(db, catalog, entry_id, **changes)
        except ValueError as exc:
            raise _error(exc) from exc
        return read_schema.model_validate(entry)

    @router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_catalog_entry(
        entry_id: int,
        db: Session = Depends(get_db),
        _: User = Depends(require_staff),
    ):
        try:
            delete_entry(db, catalog, entry_id)
        except ValueError as exc:
            raise _error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


workplaces_router = _build_router(
    CATALOG_WORKPLACES, WorkplaceCreate, WorkplaceUpdate, WorkplaceRead
)
job_titles_router = _build_router(
    CATALOG_JOB_TITLES, JobTitleCreate, JobTitleUpdate, JobTitleRead
)
educational_qualifications_router = _build_router(
    CATALOG_QUALIFICATIONS,
    EducationalQualificationCreate,
    EducationalQualificationUpdate,
    EducationalQualificationRead,
)
