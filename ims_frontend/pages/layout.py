"""
Layout routes: sidebar navigation, theme toggle and the notification feed
"""
from fastapi import APIRouter, Depends

from ims_frontend.dependencies import (
    get_auth_service,
    get_notifications,
    get_theme_service,
    require_auth,
)
from ims_frontend.schemas.auth import User
from ims_frontend.schemas.notification import NotificationList
from ims_frontend.schemas.page import NavigationItem, NavigationView, ThemeResponse
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.theme_service import ThemeService

router = APIRouter(tags=["Layout"])

NAVIGATION_ITEMS = [
    NavigationItem(name="Dashboard", href="/dashboard", permission="view_dashboard"),
    NavigationItem(name="Products", href="/products", permission="view_products"),
    NavigationItem(name="Add Product", href="/products/add", permission="create_products"),
    NavigationItem(name="Reports", href="/reports", permission="view_reports"),
    NavigationItem(name="About", href="/about", permission="view_about"),
]


@router.get("/navigation", response_model=NavigationView)
async def navigation(
    current_user: User = Depends(require_auth),
    auth: AuthService = Depends(get_auth_service),
    theme: ThemeService = Depends(get_theme_service),
):
    """Sidebar items filtered by the user's permissions"""
    return NavigationView(
        items=[item for item in NAVIGATION_ITEMS if auth.has_permission(item.permission)],
        username=current_user.username,
        full_name=current_user.full_name,
        role=current_user.role.value,
        theme=theme.theme,
    )


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(theme: ThemeService = Depends(get_theme_service)):
    return ThemeResponse(theme=theme.theme, is_dark_mode=theme.is_dark_mode)


@router.post("/theme/toggle", response_model=ThemeResponse)
async def toggle_theme(theme: ThemeService = Depends(get_theme_service)):
    new_theme = theme.toggle()
    return ThemeResponse(theme=new_theme, is_dark_mode=new_theme == "dark")


@router.get("/notifications", response_model=NotificationList)
async def drain_notifications(notifications: NotificationService = Depends(get_notifications)):
    """Pending toasts, oldest first. Reading them clears the queue."""
    return NotificationList(notifications=notifications.drain())
