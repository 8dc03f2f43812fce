"""
Home and About pages
"""
from fastapi import APIRouter, Depends

from ims_frontend.config import Settings
from ims_frontend.dependencies import (
    get_app_settings,
    get_auth_service,
    get_theme_service,
    leave_reports,
    require_auth,
)
from ims_frontend.schemas.page import AboutView, Feature, HomeView
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.theme_service import ThemeService

router = APIRouter(tags=["Pages"], dependencies=[Depends(leave_reports)])

HOME_FEATURES = [
    Feature(title="Product Management",
            description="Efficiently manage your inventory with real-time tracking and automated alerts."),
    Feature(title="Analytics & Reports",
            description="Get detailed insights with comprehensive reports and analytics dashboard."),
    Feature(title="Secure Access",
            description="Role-based access control with secure authentication and authorization."),
    Feature(title="Easy Configuration",
            description="Simple setup and configuration for your business needs."),
]

HOME_BENEFITS = [
    "Real-time inventory tracking",
    "Automated low stock alerts",
    "Comprehensive reporting",
    "Multi-user access control",
    "Mobile responsive design",
    "24/7 system availability",
]

ABOUT_FEATURES = [
    Feature(title="Product Management",
            description="Easily add, edit, and manage your inventory products with detailed information."),
    Feature(title="Real-time Analytics",
            description="Get insights into your inventory with comprehensive reports and analytics."),
    Feature(title="Secure Access",
            description="Role-based access control ensures data security and proper user permissions."),
    Feature(title="Automated Workflows",
            description="Streamline your inventory processes with automated alerts and notifications."),
    Feature(title="Multi-user Support",
            description="Collaborate with your team with multi-user access and activity tracking."),
    Feature(title="Cloud-based",
            description="Access your inventory from anywhere with our cloud-based solution."),
]


@router.get("/", response_model=HomeView)
async def home(
    app_settings: Settings = Depends(get_app_settings),
    auth: AuthService = Depends(get_auth_service),
    theme: ThemeService = Depends(get_theme_service),
):
    """Public landing page"""
    return HomeView(
        app_name=app_settings.APP_NAME,
        is_authenticated=auth.is_authenticated,
        theme=theme.theme,
        features=HOME_FEATURES,
        benefits=HOME_BENEFITS,
    )


@router.get("/about", response_model=AboutView, dependencies=[Depends(require_auth)])
async def about(app_settings: Settings = Depends(get_app_settings)):
    return AboutView(
        app_name=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        features=ABOUT_FEATURES,
    )
