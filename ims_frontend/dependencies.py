"""
Common Dependencies for page routes

Services live on app.state (built by create_app) and are handed to routes
through these providers. The guards re-check the session on every request.
"""
from typing import Callable

from fastapi import Depends, Request

from ims_frontend.config import Settings
from ims_frontend.legacy.static_site import LegacyProductClient
from ims_frontend.schemas.auth import User
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.catalog_service import ProductCatalog
from ims_frontend.services.inventory_client import InventoryClient
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.report_service import ReportService
from ims_frontend.services.theme_service import ThemeService


class RedirectRequired(Exception):
    """Raised by guards; turned into a 303 redirect by the app"""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Redirect to {location}")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_inventory_client(request: Request) -> InventoryClient:
    return request.app.state.inventory_client


def get_notifications(request: Request) -> NotificationService:
    return request.app.state.notifications


def get_theme_service(request: Request) -> ThemeService:
    return request.app.state.theme_service


def get_report_service(request: Request) -> ReportService:
    return request.app.state.report_service


def get_catalog(request: Request) -> ProductCatalog:
    return request.app.state.catalog


def get_legacy_client(request: Request) -> LegacyProductClient:
    return request.app.state.legacy_client


async def leave_reports(request: Request) -> None:
    """
    Opening any other page unmounts the reports view, which stops its polling.
    Async so the poller is cancelled on the event loop thread.
    """
    request.app.state.report_service.unmount()


async def require_auth(auth: AuthService = Depends(get_auth_service)) -> User:
    """
    Dependency to get the current signed-in user; anonymous visitors go to /login
    """
    user = auth.current_user
    if user is None:
        raise RedirectRequired("/login")
    return user


def require_permission(*keys: str) -> Callable:
    """
    Dependency factory to require specific permission(s).
    Missing permissions send the user home rather than to an error page.

    Usage:
        current_user: User = Depends(require_permission("create_products"))
        or
        @router.get("/", dependencies=[Depends(require_permission("edit_products"))])
    """
    async def permission_checker(
        current_user: User = Depends(require_auth),
        auth: AuthService = Depends(get_auth_service),
    ) -> User:
        for key in keys:
            if not auth.has_permission(key):
                raise RedirectRequired("/")
        return current_user

    return permission_checker
