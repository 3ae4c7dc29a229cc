"""Schemas for allowance and promotion orders."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AllowancePromotionCreate(BaseModel):
    employee_id: int = Field(..., ge=1)
    type: Literal["allowance", "promotion"]
    due_date: date
    notes: str | None = None


class AllowancePromotionUpdate(BaseModel):
    type: Literal["allowance", "promotion"] | None = None
    due_date: date | None = None
    notes: str | None = None

    model_config = ConfigDict(extra="forbid")


class AllowancePromotionProcess(BaseModel):
    status: Literal["completed", "rejected"]
    notes: str | None = None


class AllowancePromotionRead(BaseModel):
    id: int
    employee_id: int
    type: str
    due_date: date
    status: str
    notes: str | None = None
    processed_at: datetime | None = None
    processed_by: int | None = None

    model_config = ConfigDict(from_attributes=True)
