"""
Reports Service

Fetch-and-reduce cycle for the reports page, plus the auto-refresh state
(flag and interval) that drives the poller.
"""
import logging
from datetime import datetime
from typing import Optional, Sequence

from ims_frontend.schemas.report import InventoryReport
from ims_frontend.services.inventory_client import (
    ApiError,
    InventoryClient,
    NetworkError,
    SessionExpiredError,
)
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.report_poller import ReportPoller
from ims_frontend.services.summary_service import build_report

logger = logging.getLogger(__name__)


class ReportService:

    def __init__(
        self,
        client: InventoryClient,
        notifications: NotificationService,
        intervals: Sequence[float] = (10, 30, 60, 300),
        interval: float = 30,
        auto_refresh: bool = True,
    ):
        if interval not in intervals:
            raise ValueError(f"Refresh interval {interval}s is not one of {list(intervals)}")
        self._client = client
        self._notifications = notifications
        self.intervals = list(intervals)
        self.interval = interval
        self.auto_refresh = auto_refresh
        self.report = InventoryReport()
        self.last_updated: Optional[datetime] = None
        self.poller = ReportPoller(self._poll, interval)

    async def refresh(self) -> Optional[InventoryReport]:
        """
        Fetch all products and rebuild the report.

        Failures are notified and leave the previous report in place.
        Raises SessionExpiredError after notifying, so callers can redirect.
        """
        try:
            products = await self._client.list_products()
        except SessionExpiredError:
            self._notifications.error("Failed to load reports data")
            raise
        except (ApiError, NetworkError) as e:
            logger.error(f"Error fetching reports data: {e}")
            self._notifications.error("Failed to load reports data")
            return None

        self.report = build_report(products)
        self.last_updated = datetime.utcnow()
        return self.report

    async def _poll(self) -> None:
        try:
            await self.refresh()
        except SessionExpiredError:
            self.unmount()

    def mount(self) -> None:
        """Reports page opened: poll while auto-refresh is on."""
        if self.auto_refresh and not self.poller.running:
            self.poller.start(self.interval)

    def unmount(self) -> None:
        self.poller.stop()

    async def aclose(self) -> None:
        await self.poller.shutdown()

    def set_auto_refresh(self, enabled: bool, interval: Optional[float] = None) -> None:
        if interval is not None:
            if interval not in self.intervals:
                raise ValueError(f"Refresh interval {interval}s is not one of {self.intervals}")
            self.interval = interval
        self.auto_refresh = enabled
        if enabled:
            self.poller.start(self.interval)
        else:
            self.poller.stop()
