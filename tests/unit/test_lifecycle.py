# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for status transitions and version checks."""

from enum import Enum
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm.exc import StaleDataError

from adminboard.exceptions import (
    ConnectionFailedError,
    InvalidTransitionError,
    VersionConflictError,
)
from adminboard.lifecycle import (
    PROJECT_TRANSITIONS,
    LifecycleGuard,
    TransitionTable,
    check_version,
    commit_changes,
    commit_entity,
    project_guard,
    validate_transition,
)
from adminboard.models.enums import ProjectStatus

PLANNING = ProjectStatus.PLANNING
ACTIVE = ProjectStatus.ACTIVE
ON_HOLD = ProjectStatus.ON_HOLD
COMPLETED = ProjectStatus.COMPLETED
CANCELLED = ProjectStatus.CANCELLED

ALLOWED = {
    (PLANNING, ACTIVE),
    (PLANNING, CANCELLED),
    (ACTIVE, ON_HOLD),
    (ACTIVE, COMPLETED),
    (ACTIVE, CANCELLED),
    (ON_HOLD, ACTIVE),
    (ON_HOLD, CANCELLED),
}


@pytest.mark.parametrize("current", list(ProjectStatus))
@pytest.mark.parametrize("requested", list(ProjectStatus))
def test_project_transition_table(current, requested):
    expected = current == requested or (current, requested) in ALLOWED
    assert validate_transition(current, requested) is expected


def test_terminal_states():
    assert PROJECT_TRANSITIONS.is_terminal(COMPLETED)
    assert PROJECT_TRANSITIONS.is_terminal(CANCELLED)
    assert not PROJECT_TRANSITIONS.is_terminal(PLANNING)
    assert not PROJECT_TRANSITIONS.is_terminal(ON_HOLD)


def test_allowed_from():
    assert PROJECT_TRANSITIONS.allowed_from(ACTIVE) == {ON_HOLD, COMPLETED, CANCELLED}
    assert PROJECT_TRANSITIONS.allowed_from(COMPLETED) == frozenset()


def test_initial_state_is_planning():
    assert PROJECT_TRANSITIONS.initial == PLANNING


def test_build_requires_every_state():
    class Light(str, Enum):
        RED = "red"
        GREEN = "green"

    with pytest.raises(ValueError, match="without transition entry"):
        TransitionTable.build(Light.RED, {Light.RED: {Light.GREEN}})


def test_custom_table_generalizes():
    class Ticket(str, Enum):
        OPEN = "open"
        CLOSED = "closed"

    table = TransitionTable.build(
        Ticket.OPEN, {Ticket.OPEN: {Ticket.CLOSED}, Ticket.CLOSED: set()}
    )
    guard = LifecycleGuard(table, "Ticket")

    guard.check_transition(Ticket.OPEN, Ticket.CLOSED)
    with pytest.raises(InvalidTransitionError):
        guard.check_transition(Ticket.CLOSED, Ticket.OPEN)


class TestProjectGuard:
    """Tests for the project lifecycle guard."""

    def test_check_transition_allows_legal_move(self):
        project_guard.check_transition(PLANNING, ACTIVE)

    def test_check_transition_allows_self_transition(self):
        project_guard.check_transition(COMPLETED, COMPLETED)

    def test_check_transition_rejects_illegal_move(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            project_guard.check_transition(COMPLETED, ACTIVE)

        assert exc_info.value.code == "INVALID_TRANSITION"
        assert exc_info.value.message == (
            "Invalid status transition from Completed to Active"
        )
        assert exc_info.value.details == {"current": "Completed", "requested": "Active"}

    def test_check_version_matches(self):
        project_guard.check_version(SimpleNamespace(version=5), 5)

    def test_check_version_mismatch(self):
        with pytest.raises(VersionConflictError) as exc_info:
            project_guard.check_version(SimpleNamespace(version=6), 5)

        assert exc_info.value.code == "VERSION_CONFLICT"
        assert exc_info.value.message == (
            "Conflict: Project was modified by another user"
        )
        assert exc_info.value.expected == 5
        assert exc_info.value.actual == 6


def test_optional_check_version():
    entity = SimpleNamespace(version=3)

    check_version(entity, None, "User")
    check_version(entity, 3, "User")
    with pytest.raises(VersionConflictError):
        check_version(entity, 2, "User")


class FailingSession:
    """Stand-in session whose commit always fails."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.rolled_back = False

    def commit(self) -> None:
        raise self.error

    def rollback(self) -> None:
        self.rolled_back = True


@pytest.mark.parametrize(
    "error",
    [
        OperationalError("COMMIT", {}, Exception("connection refused")),
        InterfaceError("COMMIT", {}, Exception("connection already closed")),
    ],
)
def test_commit_changes_maps_driver_failures(error):
    db = FailingSession(error)

    with pytest.raises(ConnectionFailedError) as exc_info:
        commit_changes(db, "create Client")

    assert db.rolled_back
    assert exc_info.value.code == "CONNECTION_FAILED"
    assert exc_info.value.message == "Failed to create Client"


def test_commit_entity_maps_driver_failure():
    db = FailingSession(OperationalError("UPDATE", {}, Exception("timeout")))

    with pytest.raises(ConnectionFailedError) as exc_info:
        commit_entity(db, SimpleNamespace(version=1), "Project")

    assert db.rolled_back
    assert exc_info.value.message == "Failed to update Project"


def test_commit_entity_maps_stale_data():
    db = FailingSession(StaleDataError("0 rows matched"))

    with pytest.raises(VersionConflictError):
        commit_entity(db, SimpleNamespace(version=1), "Project")

    assert db.rolled_back
