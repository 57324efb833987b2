# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain errors raised by the service layer.

Request handlers translate these into HTTP responses (see ``adminboard.main``).
The permission engine never raises any of them; authorization questions
always degrade to a boolean answer.
"""

from typing import Any


class AdminboardError(Exception):
    """Base class for domain errors."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(AdminboardError):
    """Entity is absent or belongs to another organization."""

    code = "NOT_FOUND"


class InvalidTransitionError(AdminboardError):
    """Requested status change is not allowed from the current status."""

    code = "INVALID_TRANSITION"

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Invalid status transition from {current} to {requested}",
            {"current": current, "requested": requested},
        )
        self.current = current
        self.requested = requested


class VersionConflictError(AdminboardError):
    """Optimistic lock mismatch: the entity was modified by another user."""

    code = "VERSION_CONFLICT"

    def __init__(self, entity: str, expected: int | None, actual: int | None) -> None:
        super().__init__(
            f"Conflict: {entity} was modified by another user",
            {"expected_version": expected, "current_version": actual},
        )
        self.expected = expected
        self.actual = actual


class ValidationFailedError(AdminboardError):
    """Input violates a business rule."""

    code = "VALIDATION_ERROR"


class ReferenceNotFoundError(AdminboardError):
    """A referenced entity does not resolve within the organization."""

    code = "REFERENCE_NOT_FOUND"


class ConnectionFailedError(AdminboardError):
    """The database could not be reached or failed mid-operation."""

    code = "CONNECTION_FAILED"
