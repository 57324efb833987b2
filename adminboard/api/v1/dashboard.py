# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from adminboard.api.deps import get_db, get_organization_id, require_permission
from adminboard.models import User
from adminboard.schemas.dashboard import DashboardOverview
from adminboard.services import dashboard_service

router = APIRouter()


@router.get("/overview", response_model=DashboardOverview)
def get_overview(
    upcoming_limit: int = Query(5, ge=1, le=20),
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.view")),
) -> DashboardOverview:
    """Get the organization overview shown on the dashboard."""
    return dashboard_service.get_overview(db, organization_id, upcoming_limit)
