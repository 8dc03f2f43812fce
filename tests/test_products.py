import json


def _messages(client):
    return [n["message"] for n in client.get("/notifications").json()["notifications"]]


VALID_FORM = {
    "name": "Standing Desk",
    "category": "Home & Garden",
    "price": "349.00",
    "quantity": "5",
    "description": "Adjustable height",
}


def test_list_products(user_client):
    body = user_client.get("/products").json()
    assert body["total"] == 4
    assert len(body["products"]) == 4
    assert body["can_create"] is False
    assert body["can_delete"] is False


def test_list_products_admin_actions(admin_client):
    body = admin_client.get("/products").json()
    assert body["can_create"] and body["can_edit"] and body["can_delete"]


def test_search_filters_without_refetch(admin_client, backend):
    body = admin_client.get("/products", params={"search": "mouse"}).json()
    assert [p["name"] for p in body["products"]] == ["Wireless Mouse"]
    assert body["total"] == 4

    fetches = len(backend.calls("GET", "/api/products"))
    body = admin_client.get("/products/search", params={"q": "electronics"}).json()
    assert {p["name"] for p in body["products"]} == {"Laptop Dell XPS 13", "4K Monitor"}
    assert len(backend.calls("GET", "/api/products")) == fetches


def test_list_failure_shows_empty_table(admin_client, backend):
    backend.fail("GET", "/api/products", 503)
    body = admin_client.get("/products").json()
    assert body["products"] == []
    assert "Failed to load products. Please try again." in _messages(admin_client)


def test_delete_requires_permission(user_client, backend):
    response = user_client.delete("/products/1", params={"confirm": True})
    assert response.status_code == 403
    assert backend.calls("DELETE", "/api/products/1") == []
    assert "You do not have permission to delete products." in _messages(user_client)


def test_delete_requires_confirmation(admin_client, backend):
    response = admin_client.delete("/products/1")
    assert response.status_code == 428
    assert response.json()["confirm_required"] is True
    assert backend.calls("DELETE", "/api/products/1") == []


def test_delete_confirmed_reloads_list(admin_client, backend):
    admin_client.get("/notifications")
    response = admin_client.delete("/products/1", params={"confirm": True})
    assert response.status_code == 200
    assert response.json()["total"] == 3
    assert len(backend.calls("DELETE", "/api/products/1")) == 1
    assert backend.requests[-1].method == "GET"
    assert _messages(admin_client) == ["Product deleted successfully!"]


def test_delete_failure(admin_client, backend):
    backend.fail("DELETE", "/api/products/2", 500)
    response = admin_client.delete("/products/2", params={"confirm": True})
    assert response.status_code == 502
    assert "Failed to delete product. Please try again." in _messages(admin_client)


def test_add_page_denied_for_user(user_client):
    response = user_client.get("/products/add")
    assert response.status_code == 303
    assert response.headers["location"] == "/"


def test_add_page_form(admin_client):
    body = admin_client.get("/products/add").json()
    assert body["form"]["name"] == ""
    assert "Electronics" in body["categories"]


def test_add_invalid_price_is_not_sent(admin_client, backend):
    response = admin_client.post("/products/add", json=dict(VALID_FORM, price="0"))
    assert response.status_code == 422
    assert response.json()["errors"] == {"price": "Valid price is required"}
    assert backend.calls("POST", "/api/products") == []


def test_add_product(admin_client, backend):
    admin_client.get("/notifications")
    response = admin_client.post("/products/add", json=VALID_FORM)
    assert response.status_code == 303
    assert response.headers["location"] == "/products"

    posts = backend.calls("POST", "/api/products")
    assert len(posts) == 1
    assert json.loads(posts[0].content) == {
        "name": "Standing Desk",
        "category": "Home & Garden",
        "price": 349.0,
        "quantity": 5,
        "description": "Adjustable height",
    }
    assert posts[0].headers["Authorization"] == "Bearer admin-token"
    assert _messages(admin_client) == ["Product added successfully!"]


def test_add_rejected_by_backend(admin_client, backend):
    backend.fail("POST", "/api/products", 400, {"message": "Duplicate name"})
    response = admin_client.post("/products/add", json=VALID_FORM)
    assert response.status_code == 400
    assert "Invalid data. Please check your input." in _messages(admin_client)


def test_add_network_error(admin_client, backend):
    backend.fail_network("POST", "/api/products")
    response = admin_client.post("/products/add", json=VALID_FORM)
    assert response.status_code == 502
    assert "Network error. Please check your connection." in _messages(admin_client)


def test_add_server_error_message(admin_client, backend):
    backend.fail("POST", "/api/products", 500, {"message": "Disk full"})
    response = admin_client.post("/products/add", json=VALID_FORM)
    assert response.status_code == 502
    assert "Error: Disk full" in _messages(admin_client)


def test_edit_page_loads_product(admin_client):
    body = admin_client.get("/products/edit/1").json()
    assert body["loaded"] is True
    assert body["product_id"] == 1
    assert body["form"]["name"] == "Laptop Dell XPS 13"
    assert body["form"]["price"] == "1299.99"
    assert body["form"]["quantity"] == "15"


def test_edit_page_load_failure(admin_client):
    body = admin_client.get("/products/edit/99").json()
    assert body["loaded"] is False
    assert body["form"]["name"] == ""
    assert "Failed to load product. Please try again." in _messages(admin_client)


def test_edit_denied_for_user(user_client, backend):
    response = user_client.get("/products/edit/1")
    assert response.status_code == 303
    assert response.headers["location"] == "/"
    assert backend.calls("GET", "/api/products/1") == []


def test_edit_product(admin_client, backend):
    response = admin_client.post("/products/edit/3", json=dict(VALID_FORM, quantity="20"))
    assert response.status_code == 303
    assert len(backend.calls("PUT", "/api/products/3")) == 1
    product = next(p for p in backend.products if p["id"] == 3)
    assert product["quantity"] == 20
    assert product["name"] == "Standing Desk"


def test_edit_session_expired(admin_client, backend):
    backend.fail("PUT", "/api/products/3", 401)
    response = admin_client.post("/products/edit/3", json=VALID_FORM)
    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert "Authentication failed. Please login again." in _messages(admin_client)


def test_minimal_valid_form_posts_once(admin_client, backend):
    form = {"name": "X", "category": "Books", "price": "9.99", "quantity": "5"}
    assert admin_client.post("/products/add", json=form).status_code == 303
    assert len(backend.calls("POST", "/api/products")) == 1
