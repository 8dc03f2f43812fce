"""
Inventory REST API client

Async httpx client for the IMS backend. Every product call carries the
session's bearer token; a 401 on any product call ends the session.
"""
import logging
from typing import Any, List, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from ims_frontend.schemas.auth import LoginResponse
from ims_frontend.schemas.product import Product, ProductPayload
from ims_frontend.services.session_store import SessionStore

logger = logging.getLogger(__name__)

_product_list = TypeAdapter(List[Product])


class ApiError(Exception):
    """The backend answered with an error status or an unreadable body"""

    def __init__(self, status_code: Optional[int], message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message or f"Request failed with status {status_code}")


class SessionExpiredError(ApiError):
    """401 on an authenticated call; the session has already been cleared"""


class BadRequestError(ApiError):
    """400: the backend rejected the submitted data"""


class NetworkError(Exception):
    """No response was received from the backend"""


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail")
        return message if isinstance(message, str) else None
    return None


class InventoryClient:

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._session_store = session_store
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        headers = {}
        if authenticated:
            token = self._session_store.token
            if not token:
                self._session_store.clear()
                raise SessionExpiredError(401, "No authentication token found. Please login again.")
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed without a response: {e}")
            raise NetworkError(str(e)) from e

        if response.status_code >= 400:
            message = _server_message(response)
            logger.warning(f"{method} {path} returned {response.status_code}")
            if response.status_code == 401 and authenticated:
                self._session_store.clear()
                raise SessionExpiredError(401, message)
            if response.status_code == 400:
                raise BadRequestError(400, message)
            raise ApiError(response.status_code, message)

        return response

    @staticmethod
    def _parse(response: httpx.Response, parser):
        try:
            return parser(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected response body from {response.request.url.path}: {e}")
            raise ApiError(response.status_code, "Invalid response from server") from e

    async def login(self, username: str, password: str) -> LoginResponse:
        body = {"username": username, "password": password}
        response = await self._request("POST", "/api/auth/login", json=body, authenticated=False)
        return self._parse(response, LoginResponse.model_validate)

    async def list_products(self) -> List[Product]:
        response = await self._request("GET", "/api/products")
        return self._parse(response, _product_list.validate_python)

    async def get_product(self, product_id: Union[int, str]) -> Product:
        response = await self._request("GET", f"/api/products/{product_id}")
        return self._parse(response, Product.model_validate)

    async def create_product(self, payload: ProductPayload) -> Product:
        response = await self._request("POST", "/api/products", json=payload.model_dump())
        return self._parse(response, Product.model_validate)

    async def update_product(self, product_id: Union[int, str], payload: ProductPayload) -> Product:
        response = await self._request("PUT", f"/api/products/{product_id}", json=payload.model_dump())
        return self._parse(response, Product.model_validate)

    async def delete_product(self, product_id: Union[int, str]) -> None:
        await self._request("DELETE", f"/api/products/{product_id}")
