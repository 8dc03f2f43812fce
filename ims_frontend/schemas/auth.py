"""
Authentication Schemas
"""
import enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class UserRole(str, enum.Enum):
    """User roles for RBAC"""
    ADMIN = "ADMIN"
    USER = "USER"


class LoginRequest(BaseModel):
    """Login request schema"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Backend login response. Every field is optional; a missing token means failure."""
    token: Optional[str] = None
    id: Optional[Union[int, str]] = None
    username: Optional[str] = None
    role: Optional[str] = None
    full_name: Optional[str] = Field(None, alias="fullName")
    message: Optional[str] = None

    class Config:
        populate_by_name = True


class User(BaseModel):
    """Signed-in user profile, persisted alongside the token"""
    id: Union[int, str]
    username: str
    role: UserRole
    full_name: Optional[str] = Field(None, alias="fullName")

    class Config:
        populate_by_name = True

    @property
    def display_name(self) -> str:
        return self.full_name or self.username


class Session(BaseModel):
    """Token and user, always written and cleared together"""
    token: str
    user: User
