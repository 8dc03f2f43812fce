"""
Inventory summary service.
Pure reductions over the fetched product list, shared by the dashboard and
the reports page. Nothing here is stored; every fetch recomputes.
"""
from typing import Dict, List, Sequence

from ims_frontend.schemas.product import Product, ProductStatus
from ims_frontend.schemas.report import (
    DashboardSummary,
    InventoryReport,
    RecentActivity,
    TopProduct,
)

LOW_STOCK_STATUSES = (ProductStatus.LOW_STOCK, ProductStatus.OUT_OF_STOCK)
TOP_PRODUCTS_LIMIT = 5


def total_value(products: Sequence[Product]) -> float:
    return sum(p.price * p.quantity for p in products)


def low_stock_count(products: Sequence[Product]) -> int:
    return sum(1 for p in products if p.status in LOW_STOCK_STATUSES)


def top_products_by_value(products: Sequence[Product], limit: int = TOP_PRODUCTS_LIMIT) -> List[TopProduct]:
    """Highest price x quantity first; sorted() is stable so ties keep input order."""
    ranked = sorted(
        [TopProduct(name=p.name, sales=p.quantity, revenue=p.price * p.quantity) for p in products],
        key=lambda x: x.revenue, reverse=True
    )
    return ranked[:limit]


def count_by_status(products: Sequence[Product]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for p in products:
        key = p.status.value
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_by_category(products: Sequence[Product]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for p in products:
        counts[p.category] = counts.get(p.category, 0) + 1
    return counts


def summarize_dashboard(products: Sequence[Product]) -> DashboardSummary:
    return DashboardSummary(
        total_products=len(products),
        total_value=total_value(products),
        low_stock_items=low_stock_count(products),
        # No activity feed on the backend yet
        recent_activity=[
            RecentActivity(id=1, action="Products loaded", product=f"{len(products)} items", time="Just now"),
            RecentActivity(id=2, action="System ready", product="Inventory Management", time="Today"),
        ],
    )


def build_report(products: Sequence[Product]) -> InventoryReport:
    return InventoryReport(
        total_revenue=total_value(products),
        total_products=len(products),
        low_stock_items=low_stock_count(products),
        top_products=top_products_by_value(products),
        stock_status=count_by_status(products),
        categories=count_by_category(products),
    )
