"""
Permission policy routes
"""
from fastapi import APIRouter, Depends

from ims_frontend.config.permissions import ALL_PERMISSIONS, ROLE_PERMISSIONS
from ims_frontend.dependencies import get_auth_service, require_auth
from ims_frontend.schemas.auth import User
from ims_frontend.schemas.permission import (
    MyPermissionsResponse,
    PermissionKeyInfo,
    PermissionPolicyResponse,
)
from ims_frontend.services.auth_service import AuthService

router = APIRouter(tags=["Permissions"])


@router.get("/policy", response_model=PermissionPolicyResponse)
async def get_permission_policy():
    """The role -> permission table, for other tiers to consume."""
    permissions = [
        PermissionKeyInfo(key=key, label=info["label"], category=info["category"])
        for key, info in ALL_PERMISSIONS.items()
    ]
    roles = {role: sorted(keys) for role, keys in ROLE_PERMISSIONS.items()}
    return PermissionPolicyResponse(permissions=permissions, roles=roles)


@router.get("/me", response_model=MyPermissionsResponse)
async def get_my_permissions(
    current_user: User = Depends(require_auth),
    auth: AuthService = Depends(get_auth_service),
):
    """Return the flat list of granted permission keys for the current user."""
    return MyPermissionsResponse(role=current_user.role.value, permissions=auth.permissions())
