# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission schemas."""
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field


class PermissionSchema(BaseModel):
    """Schema representing a registered permission."""

    code: str
    module: str
    description: str | None


class CustomRoleCreate(BaseModel):
    """Schema for creating a custom role.

    Whether the permissions exist is checked against the permission
    registry by the service layer.
    """

    name: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9_-]+$")
    description: str | None = Field(None, max_length=500)
    permissions: list[str] = Field(..., min_length=1)


class CustomRoleUpdate(BaseModel):
    """Schema for updating a custom role. The name is immutable."""

    description: str | None = Field(None, max_length=500)
    permissions: list[str] | None = Field(None, min_length=1)


class CustomRoleResponse(BaseModel):
    """Schema representing a custom role."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str | None
    permissions: list[str]
    created_by_id: uuid.UUID | None
    created_at: datetime.datetime
    updated_at: datetime.datetime
