"""Use cases for the workplace, job title and educational qualification catalogues."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import EducationalQualification, JobTitle, Workplace
from app.infrastructure.repositories import (
    CatalogRepository,
    EducationalQualificationRepository,
    JobTitleRepository,
    WorkplaceRepository,
)

CATALOG_WORKPLACES = "workplaces"
CATALOG_JOB_TITLES = "job-titles"
CATALOG_QUALIFICATIONS = "educational-qualifications"

_REPOSITORIES: dict[str, type[CatalogRepository]] = {
    CATALOG_WORKPLACES: WorkplaceRepository,
    CATALOG_JOB_TITLES: JobTitleRepository,
    CATALOG_QUALIFICATIONS: EducationalQualificationRepository,
}
_ENTITIES: dict[str, type] = {
    CATALOG_WORKPLACES: Workplace,
    CATALOG_JOB_TITLES: JobTitle,
    CATALOG_QUALIFICATIONS: EducationalQualification,
}
_NOT_FOUND = {
    CATALOG_WORKPLACES: "Lugar de trabajo no encontrado",
    CATALOG_JOB_TITLES: "Cargo no encontrado",
    CATALOG_QUALIFICATIONS: "Titulación no encontrada",
}

# Employee attribute holding a reference to each catalogue.
EMPLOYEE_REFERENCES = {
    "workplace_id": CATALOG_WORKPLACES,
    "job_title_id": CATALOG_JOB_TITLES,
    "educational_qualification_id": CATALOG_QUALIFICATIONS,
}


def not_found_message(catalog: str) -> str:
    return _NOT_FOUND[catalog]


def _repository(session: Session, catalog: str) -> CatalogRepository:
    try:
        return _REPOSITORIES[catalog](session)
    except KeyError as exc:
        raise ValueError("Catálogo no válido") from exc


def _ensure_positive(catalog: str, entry: Any) -> None:
    if catalog == CATALOG_JOB_TITLES and entry.grade < 1:
        raise ValueError("El grado debe ser un entero positivo")
    if catalog == CATALOG_QUALIFICATIONS and entry.level < 0:
        raise ValueError("El nivel no puede ser negativo")


def list_entries(session: Session, catalog: str) -> Sequence[Any]:
    return _repository(session, catalog).list()


def get_entry(session: Session, catalog: str, entry_id: int) -> Any:
    entry = _repository(session, catalog).get(entry_id)
    if entry is None:
        raise ValueError(not_found_message(catalog))
    return entry


def create_entry(session: Session, catalog: str, **fields: Any) -> Any:
    repository = _repository(session, catalog)
    entry = _ENTITIES[catalog](id=None, **fields)
    _ensure_positive(catalog, entry)
    return repository.create(entry)


def update_entry(session: Session, catalog: str, entry_id: int, **changes: Any) -> Any:
    repository = _repository(session, catalog)
    current = repository.get(entry_id)
    if current is None:
        raise ValueError(not_found_message(catalog))
    updated = replace(current, **changes)
    _ensure_positive(catalog, updated)
    return repository.update(updated)


def delete_entry(session: Session, catalog: str, entry_id: int) -> None:
    """Remove the entry; employees that referenced it keep their record."""

    if not _repository(session, catalog).delete(entry_id):
        raise ValueError(not_found_message(catalog))


def ensure_references_exist(session: Session, **references: int | None) -> None:
    """Raise ``ValueError`` when an employee points at a missing catalogue entry."""

    for field, entry_id in references.items():
        if entry_id is None:
            continue
        get_entry(session, EMPLOYEE_REFERENCES[field], entry_id)


__all__ = [
    "CATALOG_JOB_TITLES",
    "CATALOG_QUALIFICATIONS",
    "CATALOG_WORKPLACES",
    "EMPLOYEE_REFERENCES",
    "create_entry",
    "delete_entry",
    "ensure_references_exist",
    "get_entry",
    "list_entries",
    "not_found_message",
    "update_entry",
]
