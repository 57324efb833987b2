# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from adminboard.api.v1 import (
    auth,
    clients,
    companies,
    dashboard,
    projects,
    roles,
    users,
)

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Dashboard routes
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

# Company routes
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])

# Client routes
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])

# Project routes
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])

# Custom role routes
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])

# User management routes
api_router.include_router(users.router, prefix="/users", tags=["users"])
