"""
Permission registry: single source of truth for all permission keys, labels,
categories, and the role -> permission policy.
"""

ALL_PERMISSIONS = {
    # Pages
    "view_dashboard": {"label": "Dashboard Page", "category": "pages"},
    "view_products":  {"label": "Products Page",  "category": "pages"},
    "view_reports":   {"label": "Reports Page",   "category": "pages"},
    "view_about":     {"label": "About Page",     "category": "pages"},

    # Product management
    "create_products": {"label": "Create Products", "category": "products"},
    "edit_products":   {"label": "Edit Products",   "category": "products"},
    "delete_products": {"label": "Delete Products", "category": "products"},
}

ROLES = ["ADMIN", "USER"]

_USER_PERMISSIONS = {
    "view_dashboard", "view_products", "view_reports", "view_about",
}

# role -> set of granted permission keys
ROLE_PERMISSIONS = {
    "USER": frozenset(_USER_PERMISSIONS),
    "ADMIN": frozenset(_USER_PERMISSIONS | {
        "create_products", "edit_products", "delete_products",
    }),
}


def permissions_for_role(role) -> frozenset:
    """Granted permission keys for a role; unknown roles get nothing."""
    role_val = role.value if hasattr(role, "value") else str(role)
    return ROLE_PERMISSIONS.get(role_val, frozenset())


def role_has_permission(role, permission: str) -> bool:
    return permission in permissions_for_role(role)
