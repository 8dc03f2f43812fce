"""
Static page and layout schemas
"""
from typing import List, Optional

from pydantic import BaseModel


class Feature(BaseModel):
    title: str
    description: str


class HomeView(BaseModel):
    app_name: str
    is_authenticated: bool
    theme: str
    features: List[Feature]
    benefits: List[str]


class AboutView(BaseModel):
    app_name: str
    version: str
    features: List[Feature]


class LoginView(BaseModel):
    app_name: str
    theme: str


class NavigationItem(BaseModel):
    name: str
    href: str
    permission: str


class NavigationView(BaseModel):
    """Sidebar entries the user may open, plus navbar user info"""
    items: List[NavigationItem]
    username: str
    full_name: Optional[str] = None
    role: str
    theme: str


class ThemeResponse(BaseModel):
    theme: str
    is_dark_mode: bool
