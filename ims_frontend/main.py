"""
IMS Frontend - Main FastAPI Application
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import httpx
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from ims_frontend.config import Settings, settings
from ims_frontend.dependencies import RedirectRequired
from ims_frontend.legacy.static_site import LegacyProductClient
from ims_frontend.pages import auth, dashboard, home, layout, legacy, permissions, products, reports
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.catalog_service import ProductCatalog
from ims_frontend.services.inventory_client import InventoryClient, SessionExpiredError
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.report_service import ReportService
from ims_frontend.services.session_store import SessionStore
from ims_frontend.services.storage import FileStorage
from ims_frontend.services.theme_service import ThemeService

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    legacy_transport: Optional[httpx.BaseTransport] = None,
) -> FastAPI:
    """
    Build the application and its services

    Args:
        app_settings: Settings to use (default: environment settings)
        transport: httpx transport for the backend client (tests pass a mock)
        legacy_transport: httpx transport for the server-rendered pages' client
    """
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.LOG_LEVEL)

    storage = FileStorage(Path(app_settings.SESSION_FILE))
    notifications = NotificationService(limit=app_settings.NOTIFICATION_LIMIT)
    session_store = SessionStore(storage)
    inventory_client = InventoryClient(
        app_settings.API_BASE_URL,
        session_store,
        timeout=app_settings.API_TIMEOUT_SECONDS,
        transport=transport,
    )
    auth_service = AuthService(session_store, inventory_client, notifications)
    legacy_client = LegacyProductClient(
        app_settings.API_BASE_URL,
        timeout=app_settings.API_TIMEOUT_SECONDS,
        transport=legacy_transport,
    )
    report_service = ReportService(
        inventory_client,
        notifications,
        intervals=app_settings.REPORT_REFRESH_INTERVALS,
        interval=app_settings.REPORT_REFRESH_SECONDS,
        auto_refresh=app_settings.REPORT_AUTO_REFRESH,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        # Startup
        logger.info(f"Starting up {app_settings.APP_NAME}...")
        auth_service.restore()
        yield
        # Shutdown
        logger.info("Shutting down...")
        await report_service.aclose()
        await inventory_client.aclose()
        legacy_client.close()

    app = FastAPI(
        title=f"{app_settings.APP_NAME} Frontend",
        description="Page views for the Inventory Management System",
        version=app_settings.APP_VERSION,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        lifespan=lifespan
    )

    app.state.settings = app_settings
    app.state.notifications = notifications
    app.state.session_store = session_store
    app.state.inventory_client = inventory_client
    app.state.auth_service = auth_service
    app.state.theme_service = ThemeService(storage, default=app_settings.DEFAULT_THEME)
    app.state.report_service = report_service
    app.state.catalog = ProductCatalog()
    app.state.legacy_client = legacy_client

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    # Security headers middleware
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response

    @app.exception_handler(RedirectRequired)
    async def redirect_required_handler(request: Request, exc: RedirectRequired):
        return RedirectResponse(exc.location, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(SessionExpiredError)
    async def session_expired_handler(request: Request, exc: SessionExpiredError):
        # The client has already cleared the stored session
        logger.info(f"Session expired on {request.url.path}, redirecting to /login")
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    # Include routers
    app.include_router(home.router)
    app.include_router(auth.router)
    app.include_router(layout.router)
    app.include_router(dashboard.router)
    app.include_router(products.router, prefix="/products")
    app.include_router(reports.router, prefix="/reports")
    app.include_router(permissions.router, prefix="/permissions")
    app.include_router(legacy.router, prefix="/legacy")

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app


app = create_app()
