"""User account schemas."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)

    @field_validator("username", "name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class UserUpdate(UserCreate):
    """Full replacement of a user's editable fields."""


class LoginRequest(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    """A user as returned by the API — never includes the password."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    name: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserOut


class AvailabilityResponse(BaseModel):
    available: bool
