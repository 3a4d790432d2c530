"""
Permissions and Roles Configuration
Defines the content resources, their CRUD actions and the permissions each
site role carries. Roles are stored as a plain column on the users table, so
this matrix is the single source of truth for authorization checks.
"""

# Content resources and their actions
MODULES = {
    "user": {
        "resource": "user",
        "actions": ["create", "read", "update", "delete"],
        "description": "Site user accounts"
    },
    "project": {
        "resource": "project",
        "actions": ["create", "read", "update", "delete"],
        "description": "Portfolio projects"
    },
    "document": {
        "resource": "document",
        "actions": ["create", "read", "update", "delete"],
        "description": "Documents, certificates and storage folders"
    },
    "gallery": {
        "resource": "gallery",
        "actions": ["create", "read", "update", "delete"],
        "description": "Gallery images"
    },
    "skill": {
        "resource": "skill",
        "actions": ["create", "read", "update", "delete"],
        "description": "Skill categories and skills"
    },
    "education": {
        "resource": "education",
        "actions": ["create", "read", "update", "delete"],
        "description": "Education history"
    },
    "experience": {
        "resource": "experience",
        "actions": ["create", "read", "update", "delete"],
        "description": "Work experience"
    },
    "certification": {
        "resource": "certification",
        "actions": ["create", "read", "update", "delete"],
        "description": "Certifications"
    },
    "admin": {
        "resource": "admin",
        "actions": ["access"],
        "description": "Admin dashboard"
    }
}

CONTENT_RESOURCES = [
    "project", "document", "gallery", "skill",
    "education", "experience", "certification"
]

ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLE_USER = "user"
ROLE_VIEWER = "viewer"

# Role definitions: which actions each role gets on which resources
ROLE_TYPES = {
    ROLE_ADMIN: {
        "resources": list(MODULES.keys()),
        "permissions": ["create", "read", "update", "delete", "access"],
        "description": "Full administrative access"
    },
    ROLE_MANAGER: {
        "resources": CONTENT_RESOURCES + ["admin"],
        "permissions": ["read", "update", "access"],
        "description": "Can read and edit content and open the admin dashboard"
    },
    ROLE_USER: {
        "resources": list(CONTENT_RESOURCES),
        "permissions": ["read"],
        "description": "Read access to all content"
    },
    ROLE_VIEWER: {
        "resources": ["project", "document", "gallery", "skill"],
        "permissions": ["read"],
        "description": "Read access to public content"
    }
}


def get_permission_matrix():
    """
    Returns a dictionary with all permissions and the permissions held by each role
    Format: {
        "permissions": [
            {"name": "project:create", "resource": "project", "action": "create", "description": "..."},
            ...
        ],
        "roles": {
            "admin": {"description": "...", "permissions": ["admin:access", ...]},
            ...
        }
    }
    """
    permissions = []
    roles = {}

    for module_name, module_config in MODULES.items():
        resource = module_config["resource"]
        for action in module_config["actions"]:
            permissions.append({
                "name": f"{resource}:{action}",
                "resource": resource,
                "action": action,
                "description": f"{action.capitalize()} {module_config['description'].lower()}"
            })

    for role_name, role_config in ROLE_TYPES.items():
        role_permissions = []
        for resource in role_config["resources"]:
            for action in MODULES[resource]["actions"]:
                if action in role_config["permissions"]:
                    role_permissions.append(f"{resource}:{action}")
        roles[role_name] = {
            "description": role_config["description"],
            "permissions": sorted(role_permissions)
        }

    return {
        "permissions": permissions,
        "roles": roles
    }


PERMISSION_MATRIX = get_permission_matrix()


def normalize_role(role) -> str:
    """Map unknown or missing role values to the default user role."""
    if isinstance(role, str) and role.lower() in ROLE_TYPES:
        return role.lower()
    return ROLE_USER


def get_role_permissions(role) -> list:
    return PERMISSION_MATRIX["roles"][normalize_role(role)]["permissions"]


def has_permission(role, permission: str) -> bool:
    return permission in get_role_permissions(role)


def has_any_permission(role, permissions: list) -> bool:
    granted = get_role_permissions(role)
    return any(p in granted for p in permissions)


def has_all_permissions(role, permissions: list) -> bool:
    granted = get_role_permissions(role)
    return all(p in granted for p in permissions)


def is_admin(role) -> bool:
    return normalize_role(role) == ROLE_ADMIN


def is_manager_or_above(role) -> bool:
    return normalize_role(role) in (ROLE_MANAGER, ROLE_ADMIN)
