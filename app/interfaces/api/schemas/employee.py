"""Employee schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class EmployeeBase(BaseModel):
    employee_number: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, max_length=30)
    date_of_birth: date | None = None
    hiring_date: date
    current_grade: int = Field(..., ge=1)
    last_promotion_date: date | None = None
    last_allowance_date: date | None = None
    status: str = Field(default="active", max_length=20)
    retirement_date: date | None = None
    workplace_id: int | None = Field(default=None, ge=1)
    job_title_id: int | None = Field(default=None, ge=1)
    educational_qualification_id: int | None = Field(default=None, ge=1)


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(BaseModel):
    employee_number: str | None = Field(default=None, min_length=1, max_length=50)
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, max_length=30)
    date_of_birth: date | None = None
    hiring_date: date | None = None
    current_grade: int | None = Field(default=None, ge=1)
    last_promotion_date: date | None = None
    last_allowance_date: date | None = None
    status: str | None = Field(default=None, max_length=20)
    retirement_date: date | None = None
    workplace_id: int | None = Field(default=None, ge=1)
    job_title_id: int | None = Field(default=None, ge=1)
    educational_qualification_id: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class EmployeeRead(EmployeeBase):
    id: int
    full_name: str

    model_config = ConfigDict(from_attributes=True)


class EmployeeEntitlementsRead(BaseModel):
    """Next due dates computed for one employee."""

    employee_id: int
    checked_on: date
    next_allowance_date: date | None
    next_promotion_date: date | None
    retirement_date: date | None
