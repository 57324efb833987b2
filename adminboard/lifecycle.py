# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Status transitions and optimistic locking for versioned entities."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from adminboard.exceptions import (
    ConnectionFailedError,
    InvalidTransitionError,
    VersionConflictError,
)
from adminboard.models.enums import ProjectStatus

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Enum)


@dataclass(frozen=True)
class TransitionTable(Generic[S]):
    """Directed graph of legal status changes."""

    initial: S
    edges: Mapping[S, frozenset[S]]

    @classmethod
    def build(cls, initial: S, edges: Mapping[S, set[S]]) -> "TransitionTable[S]":
        """Build a read-only table. Every state must appear as a key."""
        states = set(type(initial))
        missing = states - set(edges)
        if missing:
            raise ValueError(f"States without transition entry: {sorted(missing)}")
        return cls(
            initial=initial,
            edges=MappingProxyType(
                {state: frozenset(targets) for state, targets in edges.items()}
            ),
        )

    def validate_transition(self, current: S, next_status: S) -> bool:
        """Check if moving from ``current`` to ``next_status`` is allowed.

        Staying in the same state is always allowed.
        """
        if current == next_status:
            return True
        return next_status in self.edges.get(current, frozenset())

    def is_terminal(self, status: S) -> bool:
        """Check if no transition leaves ``status``."""
        return not self.edges.get(status)

    def allowed_from(self, current: S) -> frozenset[S]:
        """Get the states reachable in one step from ``current``."""
        return self.edges.get(current, frozenset())


PROJECT_TRANSITIONS: TransitionTable[ProjectStatus] = TransitionTable.build(
    ProjectStatus.PLANNING,
    {
        ProjectStatus.PLANNING: {ProjectStatus.ACTIVE, ProjectStatus.CANCELLED},
        ProjectStatus.ACTIVE: {
            ProjectStatus.ON_HOLD,
            ProjectStatus.COMPLETED,
            ProjectStatus.CANCELLED,
        },
        ProjectStatus.ON_HOLD: {ProjectStatus.ACTIVE, ProjectStatus.CANCELLED},
        ProjectStatus.COMPLETED: set(),
        ProjectStatus.CANCELLED: set(),
    },
)


def validate_transition(current: ProjectStatus, next_status: ProjectStatus) -> bool:
    """Check a project status change against the project transition table."""
    return PROJECT_TRANSITIONS.validate_transition(current, next_status)


class LifecycleGuard(Generic[S]):
    """Gatekeeper for mutating writes of versioned, status-bearing entities.

    Transition legality and version equality are separate checks and both
    must pass before a write reaches the database.
    """

    def __init__(self, transitions: TransitionTable[S], entity_name: str) -> None:
        self.transitions = transitions
        self.entity_name = entity_name

    def check_transition(self, current: S, requested: S) -> None:
        """Raise InvalidTransitionError if the status change is not allowed."""
        if not self.transitions.validate_transition(current, requested):
            raise InvalidTransitionError(current.value, requested.value)

    def check_version(self, entity: Any, expected_version: int) -> None:
        """Raise VersionConflictError if the loaded version is not the expected one."""
        if entity.version != expected_version:
            raise VersionConflictError(
                self.entity_name, expected_version, entity.version
            )

    def commit(self, db: Session, entity: Any) -> None:
        """Flush and commit pending changes on ``entity``.

        The mapper's version column turns the UPDATE into a compare-and-set,
        so a writer that committed after our read makes the flush fail here.
        """
        commit_entity(db, entity, self.entity_name)


def commit_changes(db: Session, action: str) -> None:
    """Commit the session, turning driver failures into ConnectionFailedError.

    ``action`` names the write for log and error messages, e.g. "create Client".
    """
    try:
        db.commit()
    except (OperationalError, InterfaceError) as e:
        db.rollback()
        logger.error(f"Database failure, could not {action}: {e}")
        raise ConnectionFailedError(f"Failed to {action}") from e


def commit_entity(db: Session, entity: Any, entity_name: str) -> None:
    """Commit and refresh a versioned entity, mapping database failures.

    The entity is always marked modified so the version moves by exactly one
    per successful write, even when no column value changed.
    """
    entity.updated_at = datetime.utcnow()
    try:
        commit_changes(db, f"update {entity_name}")
    except StaleDataError as e:
        db.rollback()
        logger.info(f"Concurrent modification of {entity_name}: {e}")
        raise VersionConflictError(entity_name, None, None) from e
    db.refresh(entity)


def check_version(entity: Any, expected_version: int | None, entity_name: str) -> None:
    """Optional version gate for entities without a status lifecycle."""
    if expected_version is not None and entity.version != expected_version:
        raise VersionConflictError(entity_name, expected_version, entity.version)


project_guard: LifecycleGuard[ProjectStatus] = LifecycleGuard(
    PROJECT_TRANSITIONS, "Project"
)
