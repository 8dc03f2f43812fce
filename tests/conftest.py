"""
Shared fixtures: an in-memory stand-in for the IMS backend and an app wired to it.
"""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from ims_frontend.config import Settings
from ims_frontend.main import create_app

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"

SEED_PRODUCTS = [
    {"id": 1, "name": "Laptop Dell XPS 13", "category": "Electronics", "price": 1299.99,
     "quantity": 15, "description": "High-performance laptop", "status": "IN_STOCK"},
    {"id": 2, "name": "Wireless Mouse", "category": "Accessories", "price": 29.99,
     "quantity": 45, "description": "Ergonomic wireless mouse", "status": "IN_STOCK"},
    {"id": 3, "name": "Mechanical Keyboard", "category": "Accessories", "price": 89.99,
     "quantity": 8, "description": "RGB mechanical keyboard", "status": "LOW_STOCK"},
    {"id": 4, "name": "4K Monitor", "category": "Electronics", "price": 399.99,
     "quantity": 0, "description": "27-inch 4K monitor", "status": "OUT_OF_STOCK"},
]


class FakeBackend:
    """
    Minimal IMS REST backend for httpx.MockTransport.

    Records every request. `fail(method, path, status, body)` forces a
    response; `fail_network(method, path)` raises a connection error.
    """

    def __init__(self):
        self.products = [dict(p) for p in SEED_PRODUCTS]
        self.requests = []
        self.overrides = {}
        # the server-rendered pages call the API without a bearer token
        self.require_token = True
        self.users = {
            "admin": ("admin123", {"token": ADMIN_TOKEN, "username": "admin", "role": "ADMIN",
                                   "fullName": "System Administrator", "message": "Login successful"}),
            "user": ("user123", {"token": USER_TOKEN, "username": "user", "role": "USER",
                                 "fullName": "Regular User", "message": "Login successful"}),
        }

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def fail(self, method, path, status_code, body=None):
        self.overrides[(method, path)] = (status_code, body)

    def fail_network(self, method, path):
        self.overrides[(method, path)] = "network"

    def calls(self, method, path):
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)

        override = self.overrides.get(key)
        if override == "network":
            raise httpx.ConnectError("Connection refused", request=request)
        if override is not None:
            status_code, body = override
            return httpx.Response(status_code, json=body)

        if key == ("POST", "/api/auth/login"):
            data = json.loads(request.content)
            account = self.users.get(data.get("username"))
            if account is None or account[0] != data.get("password"):
                return httpx.Response(401, json={"message": "Invalid credentials"})
            return httpx.Response(200, json=account[1])

        if not request.url.path.startswith("/api/products"):
            return httpx.Response(404)

        if self.require_token and request.headers.get("Authorization") not in (f"Bearer {ADMIN_TOKEN}", f"Bearer {USER_TOKEN}"):
            return httpx.Response(401, json={"message": "Unauthorized"})

        parts = request.url.path.strip("/").split("/")
        if len(parts) == 2:
            if request.method == "GET":
                return httpx.Response(200, json=self.products)
            if request.method == "POST":
                data = json.loads(request.content)
                product = dict(data, id=max([p["id"] for p in self.products] + [0]) + 1)
                self.products.append(product)
                return httpx.Response(201, json=product)

        product_id = int(parts[2])
        product = next((p for p in self.products if p["id"] == product_id), None)
        if product is None:
            return httpx.Response(404)
        if request.method == "GET":
            return httpx.Response(200, json=product)
        if request.method == "PUT":
            product.update(json.loads(request.content))
            return httpx.Response(200, json=product)
        if request.method == "DELETE":
            self.products.remove(product)
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        API_BASE_URL="http://backend.test",
        SESSION_FILE=str(tmp_path / "session.json"),
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings, backend):
    return create_app(settings, transport=backend.transport, legacy_transport=backend.transport)


@pytest.fixture
def client(app):
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def login(client):
    def _login(username="admin", password="admin123"):
        return client.post("/login", json={"username": username, "password": password})
    return _login


@pytest.fixture
def admin_client(client, login):
    assert login().status_code == 303
    return client


@pytest.fixture
def user_client(client, login):
    assert login("user", "user123").status_code == 303
    return client
