# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project schemas."""
import datetime
import uuid
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from adminboard.models.enums import ProjectStatus


def _to_naive_utc(value: datetime.datetime | None) -> datetime.datetime | None:
    # Stored timestamps are naive UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)


UtcDateTime = Annotated[datetime.datetime, AfterValidator(_to_naive_utc)]


class ProjectCreate(BaseModel):
    """Schema for creating a project. New projects always start in Planning."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    client_id: uuid.UUID | None = None
    start_date: UtcDateTime
    end_date: UtcDateTime | None = None
    budget: int | None = Field(None, gt=0)
    notes: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def check_dates(self) -> "ProjectCreate":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("End date must be greater than or equal to start date")
        return self


class ProjectUpdate(BaseModel):
    """Schema for updating a project. ``version`` is the version last read.

    Setting ``client_id`` to null detaches the project from its client.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    client_id: uuid.UUID | None = None
    status: ProjectStatus | None = None
    start_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    budget: int | None = Field(None, gt=0)
    notes: str | None = Field(None, max_length=2000)
    version: int = Field(..., ge=1)

    @model_validator(mode="after")
    def check_dates(self) -> "ProjectUpdate":
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            raise ValueError("End date must be greater than or equal to start date")
        return self


class ProjectStatusUpdate(BaseModel):
    """Schema for a status-only change."""

    status: ProjectStatus
    version: int = Field(..., ge=1)


class ProjectFilters(BaseModel):
    """Filters for listing projects."""

    search: str | None = None
    client_id: uuid.UUID | None = None
    status: ProjectStatus | None = None
    start_date_from: UtcDateTime | None = None
    start_date_to: UtcDateTime | None = None
    end_date_from: UtcDateTime | None = None
    end_date_to: UtcDateTime | None = None


class ProjectResponse(BaseModel):
    """Schema for project response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    organization_id: uuid.UUID
    name: str
    description: str | None
    client_id: uuid.UUID | None
    status: ProjectStatus
    start_date: datetime.datetime
    end_date: datetime.datetime | None
    budget: int | None
    notes: str | None
    version: int
    created_at: datetime.datetime
    updated_at: datetime.datetime
