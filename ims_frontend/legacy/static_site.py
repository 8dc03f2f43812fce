"""
Helpers for the server-rendered (non-SPA) pages.

Covers the login form conveniences, search-as-you-type, client-side table
sorting and a small unauthenticated CRUD client that reloads the product
table after changes.
"""
import asyncio
import locale
import logging
import re
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import httpx

from ims_frontend.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

# Seeded backend accounts, filled in by the role tabs on the login page.
# A convenience only; the backend still checks the password.
DEMO_CREDENTIALS = {
    "user": ("user", "user123"),
    "admin": ("admin", "admin123"),
}

MIN_SEARCH_LENGTH = 2
MIN_PASSWORD_LENGTH = 6
NUMERIC_COLUMNS = ("price", "quantity")
SORTABLE_COLUMNS = ("id", "name", "category", "price", "quantity")

_NON_NUMERIC = re.compile(r"[^0-9.-]+")


def autofill_credentials(role: str) -> Optional[Tuple[str, str]]:
    """(username, password) for a role tab, or None for unknown tabs."""
    return DEMO_CREDENTIALS.get(role)


def validate_login_form(username: str, password: str) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not username.strip():
        errors["username"] = "This field is required"
    if not password.strip():
        errors["password"] = "This field is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return errors


def validate_search_query(query: str) -> Optional[str]:
    """Error message when the search form must not be submitted, else None."""
    if len(query.strip()) < MIN_SEARCH_LENGTH:
        return f"Search query must be at least {MIN_SEARCH_LENGTH} characters long."
    return None


class Debouncer:
    """
    Run a callback once input has been quiet for `delay` seconds.

    Each call cancels the pending one. Must be used inside a running loop.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = 0.5):
        self._callback = callback
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        self._handle = asyncio.get_running_loop().call_later(self.delay, self._fire, args)

    def _fire(self, args: tuple) -> None:
        self._handle = None
        self._callback(*args)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


def _format_price(price: Any) -> str:
    try:
        text = repr(float(price))
    except (TypeError, ValueError):
        # null or garbled prices render as zero
        return "0"
    return text[:-2] if text.endswith(".0") else text


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def product_row(product: Dict[str, Any]) -> Dict[str, str]:
    """Cell text for one product table row."""
    return {
        "id": _cell(product.get("id")),
        "name": _cell(product.get("name")),
        "category": _cell(product.get("category")),
        "price": f"${_format_price(product.get('price'))}",
        "quantity": _cell(product.get("quantity")),
        "edit_url": f"/products/edit/{_cell(product.get('id'))}",
    }


def _numeric_cell(text: str) -> float:
    try:
        return float(_NON_NUMERIC.sub("", text))
    except ValueError:
        # Unparseable cells sort as zero
        return 0.0


def sort_rows(rows: Sequence[Dict[str, str]], column: str) -> List[Dict[str, str]]:
    """
    Sort table rows by a column, ascending.

    price and quantity compare as numbers once currency symbols and other
    non-numeric characters are stripped; other columns use locale collation.
    """
    if column in NUMERIC_COLUMNS:
        return sorted(rows, key=lambda row: _numeric_cell(row.get(column, "").strip()))
    return sorted(rows, key=lambda row: locale.strxfrm(row.get(column, "").strip().lower()))


def filter_rows(rows: Sequence[Dict[str, str]], query: str) -> List[Dict[str, str]]:
    """Rows whose name or category contains the query, case-insensitively."""
    needle = query.strip().lower()
    return [
        row for row in rows
        if needle in row.get("name", "").lower() or needle in row.get("category", "").lower()
    ]


class LegacyRequestError(Exception):
    """Non-2xx answer to a legacy page request"""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class LegacyProductClient:
    """
    Synchronous CRUD client used by the server-rendered pages.

    Sends no Authorization header; these pages rely on the server's own
    session handling.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "LegacyProductClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, data: Any = None) -> Any:
        response = self._client.request(method, path, json=data)
        if not response.is_success:
            raise LegacyRequestError(response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get_all(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/products")

    def get_by_id(self, product_id: Union[int, str]) -> Dict[str, Any]:
        return self._request("GET", f"/api/products/{product_id}")

    def create(self, product: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/products", product)

    def update(self, product_id: Union[int, str], product: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/products/{product_id}", product)

    def delete(self, product_id: Union[int, str]) -> None:
        self._request("DELETE", f"/api/products/{product_id}")


def load_products(client: LegacyProductClient, notifications: NotificationService) -> List[Dict[str, str]]:
    """Table rows for every product; an empty table if loading fails."""
    try:
        return [product_row(p) for p in client.get_all() or []]
    except (LegacyRequestError, httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"Error loading products: {e}")
        notifications.error("Error loading products")
        return []


def delete_product(
    client: LegacyProductClient,
    product_id: Union[int, str],
    notifications: NotificationService,
    confirmed: bool,
) -> Optional[List[Dict[str, str]]]:
    """
    Delete after confirmation and return the reloaded table rows.

    Returns None when nothing was deleted.
    """
    if not confirmed:
        return None
    try:
        client.delete(product_id)
    except (LegacyRequestError, httpx.HTTPError) as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        notifications.error("Error deleting product")
        return None
    notifications.success("Product deleted successfully")
    return load_products(client, notifications)
