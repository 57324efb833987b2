# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from adminboard.models.enums import UserRole


class UserCreate(BaseModel):
    """Schema for creating a user."""

    email: EmailStr
    full_name: str | None = Field(None, max_length=255)
    role: UserRole = UserRole.MEMBER
    company_id: uuid.UUID | None = None
    title: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=50)
    bio: str | None = None


class UserUpdate(BaseModel):
    """Schema for updating a user (admin use).

    ``version`` is optional; when given, the update is rejected if the user
    was changed since it was read.
    """

    email: EmailStr | None = None
    full_name: str | None = Field(None, max_length=255)
    company_id: uuid.UUID | None = None
    title: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=50)
    bio: str | None = None
    avatar_url: str | None = Field(None, max_length=500)
    version: int | None = Field(None, ge=1)


class UserRoleUpdate(BaseModel):
    """Schema for changing a user's system role."""

    role: UserRole


class CustomRoleAssignment(BaseModel):
    """Schema for assigning (or clearing, with null) a user's custom role."""

    custom_role_id: uuid.UUID | None


class UserResponse(BaseModel):
    """Schema for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    full_name: str | None = None
    role: UserRole
    custom_role_id: uuid.UUID | None = None
    company_id: uuid.UUID | None = None
    title: str | None = None
    phone: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    is_active: bool
    deleted_at: datetime.datetime | None = None
    version: int
    created_at: datetime.datetime
    updated_at: datetime.datetime
