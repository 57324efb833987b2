# adminboard/rbac/permissions.py
"""Permission definitions.

Permissions follow a dot-notation pattern: ``resource.action``. The single
reserved value ``*`` grants everything.
"""

WILDCARD = "*"

CORE_PERMISSIONS = [
    # User management
    {"code": "users.view", "module": "users", "description": "View users"},
    {"code": "users.create", "module": "users", "description": "Create users"},
    {"code": "users.edit", "module": "users", "description": "Edit users"},
    {"code": "users.delete", "module": "users", "description": "Delete users"},
    {
        "code": "users.assign_role",
        "module": "users",
        "description": "Change the system role of a user",
    },
    {
        "code": "users.view_all",
        "module": "users",
        "description": "View users across all companies",
    },
    # Company management
    {"code": "companies.view", "module": "companies", "description": "View companies"},
    {
        "code": "companies.create",
        "module": "companies",
        "description": "Create companies",
    },
    {"code": "companies.edit", "module": "companies", "description": "Edit companies"},
    {
        "code": "companies.delete",
        "module": "companies",
        "description": "Delete companies",
    },
    # Client management
    {"code": "clients.view", "module": "clients", "description": "View clients"},
    {"code": "clients.create", "module": "clients", "description": "Create clients"},
    {"code": "clients.edit", "module": "clients", "description": "Edit clients"},
    {"code": "clients.delete", "module": "clients", "description": "Delete clients"},
    # Project management
    {"code": "projects.view", "module": "projects", "description": "View projects"},
    {
        "code": "projects.create",
        "module": "projects",
        "description": "Create projects",
    },
    {"code": "projects.edit", "module": "projects", "description": "Edit projects"},
    {
        "code": "projects.delete",
        "module": "projects",
        "description": "Delete projects",
    },
    # Role management
    {"code": "roles.view", "module": "roles", "description": "View custom roles"},
    {"code": "roles.create", "module": "roles", "description": "Create custom roles"},
    {"code": "roles.edit", "module": "roles", "description": "Edit custom roles"},
    {"code": "roles.delete", "module": "roles", "description": "Delete custom roles"},
    {
        "code": "roles.assign",
        "module": "roles",
        "description": "Assign custom roles to users",
    },
    # Settings
    {"code": "settings.view", "module": "settings", "description": "View settings"},
    {"code": "settings.edit", "module": "settings", "description": "Edit settings"},
    {
        "code": "settings.system",
        "module": "settings",
        "description": "Full system administration",
    },
    # Profiles
    {"code": "profiles.view", "module": "profiles", "description": "View profiles"},
    {"code": "profiles.edit", "module": "profiles", "description": "Edit own profile"},
]

ALL_PERMISSIONS = tuple(p["code"] for p in CORE_PERMISSIONS)


def matches_permission(held: str, required: str) -> bool:
    """Check if a held permission grants a required one.

    ``*`` matches everything, ``users.*`` matches ``users.view`` but neither
    ``users`` nor ``users.sub.view`` is matched by ``users.view``.
    """
    if held == WILDCARD:
        return True

    if held == required:
        return True

    if held.endswith(".*"):
        prefix = held[:-2]
        return required.startswith(prefix + ".")

    return False
