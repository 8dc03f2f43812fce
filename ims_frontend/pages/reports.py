"""
Reports Page
"""
from fastapi import APIRouter, Depends, HTTPException, status

from ims_frontend.dependencies import get_notifications, get_report_service, require_auth
from ims_frontend.schemas.report import AutoRefreshUpdate, ReportsView
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.report_service import ReportService

router = APIRouter(tags=["Reports"], dependencies=[Depends(require_auth)])


def _view(reports: ReportService) -> ReportsView:
    return ReportsView(
        report=reports.report,
        last_updated=reports.last_updated,
        auto_refresh=reports.auto_refresh,
        refresh_interval=reports.interval,
        refresh_intervals=reports.intervals,
    )


@router.get("", response_model=ReportsView)
async def reports_page(reports: ReportService = Depends(get_report_service)):
    """
    Fetch and aggregate the product list, then keep polling while
    auto-refresh is on
    """
    await reports.refresh()
    reports.mount()
    return _view(reports)


@router.post("/refresh", response_model=ReportsView)
async def refresh_reports(
    reports: ReportService = Depends(get_report_service),
    notifications: NotificationService = Depends(get_notifications),
):
    """Manual refresh"""
    await reports.refresh()
    notifications.success("Reports refreshed!")
    return _view(reports)


@router.put("/auto-refresh", response_model=ReportsView)
async def update_auto_refresh(
    data: AutoRefreshUpdate,
    reports: ReportService = Depends(get_report_service),
):
    """Turn polling on or off and pick its interval"""
    try:
        reports.set_auto_refresh(data.enabled, data.interval)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _view(reports)
