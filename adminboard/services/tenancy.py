# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organization scoping helpers shared by tenant-owned services."""

import uuid

from adminboard.exceptions import ValidationFailedError


def require_organization(organization_id: uuid.UUID | None) -> uuid.UUID:
    """Reject tenant-scoped calls made without an organization."""
    if organization_id is None:
        raise ValidationFailedError("Organization ID is required")
    return organization_id


def escape_like(term: str) -> str:
    """Escape LIKE wildcards in a user supplied search term."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
