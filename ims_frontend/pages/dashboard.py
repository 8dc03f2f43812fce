"""
Dashboard Page
"""
import logging

from fastapi import APIRouter, Depends

from ims_frontend.dependencies import (
    get_auth_service,
    get_inventory_client,
    get_notifications,
    leave_reports,
    require_auth,
)
from ims_frontend.schemas.auth import User
from ims_frontend.schemas.report import DashboardSummary, DashboardView
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.inventory_client import (
    ApiError,
    InventoryClient,
    NetworkError,
    SessionExpiredError,
)
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.summary_service import summarize_dashboard

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dashboard"], dependencies=[Depends(leave_reports)])


@router.get("/dashboard", response_model=DashboardView)
async def dashboard(
    current_user: User = Depends(require_auth),
    auth: AuthService = Depends(get_auth_service),
    client: InventoryClient = Depends(get_inventory_client),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Headline stock figures computed from the full product list
    """
    try:
        products = await client.list_products()
        stats = summarize_dashboard(products)
    except SessionExpiredError:
        notifications.error("Failed to load dashboard data")
        raise
    except (ApiError, NetworkError) as e:
        logger.error(f"Error fetching dashboard data: {e}")
        notifications.error("Failed to load dashboard data")
        stats = DashboardSummary()

    return DashboardView(
        full_name=current_user.full_name,
        role=current_user.role.value,
        stats=stats,
        can_create_products=auth.has_permission("create_products"),
        can_view_reports=auth.has_permission("view_reports"),
    )
