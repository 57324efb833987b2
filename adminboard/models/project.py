# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project model."""

from __future__ import annotations

import datetime
import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from adminboard.models.base import Base, TimestampMixin
from adminboard.models.enums import ProjectStatus

if TYPE_CHECKING:
    from adminboard.models.client import Client


class Project(Base, TimestampMixin):
    """Project or engagement with a status lifecycle.

    ``version`` is the optimistic-locking counter. SQLAlchemy increments it on
    every UPDATE and adds ``AND version = <loaded>`` to the statement, so a
    concurrent writer makes the flush fail instead of overwriting.
    """

    __tablename__ = "projects"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    organization_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    client_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[ProjectStatus] = mapped_column(
        Enum(ProjectStatus),
        default=ProjectStatus.PLANNING,
        nullable=False,
    )
    start_date: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime.datetime | None] = mapped_column(
        DateTime, nullable=True
    )
    # Stored in cents
    budget: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    client: Mapped[Client | None] = relationship("Client", back_populates="projects")

    __table_args__ = (
        Index("idx_projects_status", "organization_id", "status"),
        Index("idx_projects_dates", "organization_id", "start_date", "end_date"),
    )
    __mapper_args__ = {"version_id_col": version}
