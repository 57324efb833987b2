# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company model. A company is the organization (tenant) users belong to."""

from __future__ import annotations

import datetime
import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from adminboard.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from adminboard.models.user import User


class Company(Base, TimestampMixin):
    """Organization that owns users, clients and projects."""

    __tablename__ = "companies"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    deleted_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime, nullable=True
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    users: Mapped[list[User]] = relationship("User", back_populates="company")

    __mapper_args__ = {"version_id_col": version}
