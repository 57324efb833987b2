# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for permission matching."""

import pytest

from adminboard.rbac.permissions import (
    ALL_PERMISSIONS,
    CORE_PERMISSIONS,
    WILDCARD,
    matches_permission,
)


@pytest.mark.parametrize(
    ("held", "required", "expected"),
    [
        ("*", "users.view", True),
        ("*", "anything", True),
        ("users.view", "users.view", True),
        ("users.view", "users.edit", False),
        ("users.*", "users.view", True),
        ("users.*", "users.delete", True),
        ("users.*", "users", False),
        ("users.*", "usersx.view", False),
        ("users.*", "companies.view", False),
        ("users.view", "users.*", False),
        ("projects.view", "projects", False),
    ],
)
def test_matches_permission(held, required, expected):
    assert matches_permission(held, required) is expected


def test_core_permissions_are_unique_and_namespaced():
    codes = [p["code"] for p in CORE_PERMISSIONS]
    assert len(codes) == len(set(codes))
    assert WILDCARD not in codes
    for perm in CORE_PERMISSIONS:
        module, _, action = perm["code"].partition(".")
        assert module == perm["module"]
        assert action


def test_all_permissions_matches_core_table():
    assert set(ALL_PERMISSIONS) == {p["code"] for p in CORE_PERMISSIONS}
    assert "projects.edit" in ALL_PERMISSIONS
    assert "clients.delete" in ALL_PERMISSIONS
