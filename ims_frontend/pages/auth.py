"""
Login / Logout Routes
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from ims_frontend.config import Settings
from ims_frontend.dependencies import (
    get_app_settings,
    get_auth_service,
    get_theme_service,
    leave_reports,
)
from ims_frontend.schemas.auth import LoginRequest
from ims_frontend.schemas.page import LoginView
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.inventory_client import NetworkError
from ims_frontend.services.theme_service import ThemeService

router = APIRouter(tags=["Authentication"], dependencies=[Depends(leave_reports)])


@router.get("/login", response_model=LoginView)
async def login_page(
    app_settings: Settings = Depends(get_app_settings),
    auth: AuthService = Depends(get_auth_service),
    theme: ThemeService = Depends(get_theme_service),
):
    """Login form; signed-in users go straight to the dashboard"""
    if auth.is_authenticated:
        return RedirectResponse("/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    return LoginView(app_name=app_settings.APP_NAME, theme=theme.theme)


@router.post("/login")
async def login(
    credentials: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """
    Login with username and password

    Redirects to the dashboard on success
    """
    try:
        ok = await auth.login(credentials.username, credentials.password)
    except NetworkError:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Login failed. Please try again."},
        )

    if not ok:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Login failed"},
        )

    return RedirectResponse("/dashboard", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/logout")
async def logout(auth: AuthService = Depends(get_auth_service)):
    """
    Logout user

    Only local state is cleared; the backend is not called.
    Report polling stops through the router dependency
    """
    auth.logout()
    return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
