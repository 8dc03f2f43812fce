"""Schemas for the permission policy API."""
from typing import Dict, List
from pydantic import BaseModel


class PermissionKeyInfo(BaseModel):
    key: str
    label: str
    category: str


class PermissionPolicyResponse(BaseModel):
    permissions: List[PermissionKeyInfo]
    roles: Dict[str, List[str]]


class MyPermissionsResponse(BaseModel):
    role: str
    permissions: List[str]
