"""User-related schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from bistro.models.user import UserRole, UserStatus


class UserCreate(BaseModel):
    """Payload for creating a user."""

    email: EmailStr
    password: str = Field(min_length=8)
    display_name: str = Field(default="", max_length=120)
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE


class UserRead(BaseModel):
    id: uuid.UUID
    email: str
    display_name: str
    role: UserRole
    status: UserStatus

    model_config = ConfigDict(from_attributes=True)
