"""Reference catalogues used to classify employees."""

from dataclasses import dataclass


@dataclass
class Workplace:
    id: int | None
    name: str
    description: str | None = None


@dataclass
class JobTitle:
    id: int | None
    title: str
    grade: int
    description: str | None = None


@dataclass
class EducationalQualification:
    id: int | None
    name: str
    level: int
    description: str | None = None


__all__ = ["EducationalQualification", "JobTitle", "Workplace"]
