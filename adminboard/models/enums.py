# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """System role enumeration.

    Roles form a total order used for minimum-role checks:
        MEMBER < ADMIN < SUPERADMIN
    """

    MEMBER = "member"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class ProjectStatus(str, Enum):
    """Project lifecycle status.

    Status flow:
        Planning → Active ⇄ OnHold
            ↓         ↓        ↓
        Cancelled  Completed  Cancelled

    Completed and Cancelled are terminal.
    """

    PLANNING = "Planning"
    ACTIVE = "Active"
    ON_HOLD = "OnHold"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
