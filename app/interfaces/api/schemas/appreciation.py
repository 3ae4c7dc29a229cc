"""Schemas for appreciation and disciplinary records."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AppreciationCreate(BaseModel):
    employee_id: int = Field(..., ge=1)
    type: Literal["appreciation", "disciplinary"]
    description: str = Field(..., min_length=1)
    issued_on: date
    issued_by: str = Field(..., min_length=1, max_length=120)
    additional_service_months: int | None = Field(default=None, ge=0)


class AppreciationUpdate(BaseModel):
    type: Literal["appreciation", "disciplinary"] | None = None
    description: str | None = Field(default=None, min_length=1)
    issued_on: date | None = None
    issued_by: str | None = Field(default=None, min_length=1, max_length=120)
    additional_service_months: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class AppreciationRead(BaseModel):
    id: int
    employee_id: int
    type: str
    description: str
    issued_on: date
    issued_by: str
    additional_service_months: int

    model_config = ConfigDict(from_attributes=True)
