"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RoleRead(BaseModel):
    id: int
    name: str
    alias: str

    model_config = ConfigDict(from_attributes=True)


class UserBase(BaseModel):
    name: str = Field(..., max_length=50)
    email: EmailStr


class UserCreate(UserBase):
    role_id: int = Field(..., ge=1)
    password: str = Field(..., min_length=8)
    must_change_password: bool = True


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8)
    is_active: bool | None = None
    role_id: int | None = None

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    must_change_password: bool
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
    is_active: bool
    deleted: bool
    deleted_by: int | None
    deleted_at: datetime | None
    role: RoleRead

    model_config = ConfigDict(from_attributes=True)
