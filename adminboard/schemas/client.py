# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Client schemas."""
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ClientBase(BaseModel):
    """Base client schema."""

    model_config = ConfigDict(str_strip_whitespace=True)

    company_name: str = Field(..., min_length=1, max_length=200)
    contact_person: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    address: str | None = Field(None, max_length=500)
    notes: str | None = Field(None, max_length=2000)


class ClientCreate(ClientBase):
    """Schema for creating a client."""


class ClientUpdate(BaseModel):
    """Schema for updating a client. ``version`` is the version last read."""

    model_config = ConfigDict(str_strip_whitespace=True)

    company_name: str | None = Field(None, min_length=1, max_length=200)
    contact_person: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, min_length=1, max_length=50)
    address: str | None = Field(None, max_length=500)
    notes: str | None = Field(None, max_length=2000)
    version: int = Field(..., ge=1)


class ClientFilters(BaseModel):
    """Filters for listing clients."""

    search: str | None = None
    include_deleted: bool = False


class ClientResponse(BaseModel):
    """Schema for client response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    organization_id: uuid.UUID
    company_name: str
    contact_person: str
    email: str
    phone: str
    address: str | None
    notes: str | None
    version: int
    deleted_at: datetime.datetime | None
    created_at: datetime.datetime
    updated_at: datetime.datetime
