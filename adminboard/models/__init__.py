# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from adminboard.models.base import Base, TimestampMixin
from adminboard.models.client import Client
from adminboard.models.company import Company
from adminboard.models.custom_role import CustomRole
from adminboard.models.enums import ProjectStatus, UserRole
from adminboard.models.login_code import LoginCode
from adminboard.models.project import Project
from adminboard.models.session import Session
from adminboard.models.user import User

__all__ = [
    "Base",
    "Client",
    "Company",
    "CustomRole",
    "LoginCode",
    "Project",
    "ProjectStatus",
    "Session",
    "TimestampMixin",
    "User",
    "UserRole",
]
