"""Schemas for the employee catalogues."""

from pydantic import BaseModel, ConfigDict, Field


class WorkplaceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str | None = None


class WorkplaceUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class WorkplaceRead(WorkplaceCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)


class JobTitleCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=120)
    grade: int = Field(..., ge=1)
    description: str | None = None


class JobTitleUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=120)
    grade: int | None = Field(default=None, ge=1)
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class JobTitleRead(JobTitleCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)


class EducationalQualificationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    level: int = Field(..., ge=0)
    description: str | None = None


class EducationalQualificationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    level: int | None = Field(default=None, ge=0)
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class EducationalQualificationRead(EducationalQualificationCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
