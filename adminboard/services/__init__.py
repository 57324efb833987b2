# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from adminboard.services import (
    auth_service,
    client_service,
    company_service,
    dashboard_service,
    project_service,
    rbac_service,
    user_service,
)

__all__ = [
    "auth_service",
    "client_service",
    "company_service",
    "dashboard_service",
    "project_service",
    "rbac_service",
    "user_service",
]
