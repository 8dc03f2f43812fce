"""
Dashboard and Report Schemas
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel


class TopProduct(BaseModel):
    name: str
    sales: int
    revenue: float


class RecentActivity(BaseModel):
    id: int
    action: str
    product: str
    time: str


class DashboardSummary(BaseModel):
    total_products: int = 0
    total_value: float = 0.0
    low_stock_items: int = 0
    recent_activity: List[RecentActivity] = []


class InventoryReport(BaseModel):
    """Derived from the full product list on every fetch, never stored"""
    total_revenue: float = 0.0
    total_products: int = 0
    low_stock_items: int = 0
    top_products: List[TopProduct] = []
    stock_status: Dict[str, int] = {}
    categories: Dict[str, int] = {}


class DashboardView(BaseModel):
    full_name: Optional[str] = None
    role: str
    stats: DashboardSummary
    can_create_products: bool = False
    can_view_reports: bool = False


class ReportsView(BaseModel):
    report: InventoryReport
    last_updated: Optional[datetime] = None
    auto_refresh: bool
    refresh_interval: int
    refresh_intervals: List[int]


class AutoRefreshUpdate(BaseModel):
    enabled: bool
    interval: Optional[int] = None
