from ims_frontend.config.permissions import (
    ALL_PERMISSIONS,
    ROLE_PERMISSIONS,
    permissions_for_role,
    role_has_permission,
)
from ims_frontend.schemas.auth import UserRole

PAGE_PERMISSIONS = {"view_dashboard", "view_products", "view_reports", "view_about"}
PRODUCT_PERMISSIONS = {"create_products", "edit_products", "delete_products"}


def test_user_role_gets_page_permissions_only():
    assert permissions_for_role("USER") == PAGE_PERMISSIONS


def test_admin_role_is_superset_of_user():
    admin = permissions_for_role(UserRole.ADMIN)
    assert admin == PAGE_PERMISSIONS | PRODUCT_PERMISSIONS
    assert permissions_for_role(UserRole.USER) < admin


def test_unknown_role_has_no_permissions():
    assert permissions_for_role("GUEST") == frozenset()
    assert not role_has_permission("GUEST", "view_dashboard")


def test_role_has_permission():
    assert role_has_permission(UserRole.ADMIN, "delete_products")
    assert not role_has_permission(UserRole.USER, "delete_products")
    assert not role_has_permission(UserRole.ADMIN, "no_such_permission")


def test_every_granted_key_is_registered():
    for keys in ROLE_PERMISSIONS.values():
        assert keys <= set(ALL_PERMISSIONS)


def test_policy_route_lists_table(client):
    response = client.get("/permissions/policy")
    assert response.status_code == 200
    body = response.json()
    assert {p["key"] for p in body["permissions"]} == set(ALL_PERMISSIONS)
    assert set(body["roles"]["USER"]) == PAGE_PERMISSIONS


def test_my_permissions_requires_login(client):
    response = client.get("/permissions/me")
    assert response.status_code == 303
    assert response.headers["location"] == "/login"


def test_my_permissions_for_user(user_client):
    body = user_client.get("/permissions/me").json()
    assert body["role"] == "USER"
    assert body["permissions"] == sorted(PAGE_PERMISSIONS)
