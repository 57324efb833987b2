# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard schemas for aggregated summary data."""

import datetime
import uuid

from pydantic import BaseModel

from adminboard.models.enums import ProjectStatus


class ProjectsByStatus(BaseModel):
    """Count of projects per lifecycle status."""

    planning: int = 0
    active: int = 0
    on_hold: int = 0
    completed: int = 0
    cancelled: int = 0


class UpcomingProject(BaseModel):
    """Preview of a project starting soon."""

    id: uuid.UUID
    name: str
    client_name: str | None
    status: ProjectStatus
    start_date: datetime.datetime
    days_until: int


class DashboardOverview(BaseModel):
    """Organization overview."""

    projects_by_status: ProjectsByStatus
    active_clients: int
    total_budget: int
    upcoming_projects: list[UpcomingProject]
