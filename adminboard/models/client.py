# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Client model."""

from __future__ import annotations

import datetime
import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from adminboard.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from adminboard.models.project import Project


class Client(Base, TimestampMixin):
    """Business or individual client of an organization.

    Clients are soft-deleted; projects that referenced a deleted client keep
    existing with their client reference cleared.
    """

    __tablename__ = "clients"

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
    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_person: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    deleted_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime, nullable=True
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    projects: Mapped[list[Project]] = relationship("Project", back_populates="client")

    __table_args__ = (
        Index("idx_clients_org_deleted", "organization_id", "deleted_at"),
    )
    __mapper_args__ = {"version_id_col": version}
