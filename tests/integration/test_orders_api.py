"""Integration tests for the REST API endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from ecommerce.domain.events import OrderCreatedEvent


def _create_customer(client: TestClient, email: str = "ada@example.com") -> str:
    response = client.post("/api/v1/customers", json={"name": "Ada Lovelace", "email": email})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _create_product(client: TestClient, name: str, price: str) -> str:
    response = client.post("/api/v1/products", json={"name": name, "price": price})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_health_check(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_create_and_get_order(test_client: TestClient, api_event_bus):
    """POST /orders then GET /orders/{id} returns the captured lines."""
    events = []
    api_event_bus.subscribe(events.append, OrderCreatedEvent)
    customer_id = _create_customer(test_client)
    p1 = _create_product(test_client, "Notebook", "9.99")
    p2 = _create_product(test_client, "Pencil", "3.50")

    response = test_client.post(
        "/api/v1/orders",
        json={
            "customer_id": customer_id,
            "items": [
                {"product_id": p1, "quantity": 2},
                {"product_id": p2, "quantity": 1},
            ],
        },
    )

    assert response.status_code == 201, response.text
    order_id = response.json()["id"]

    response = test_client.get(f"/api/v1/orders/{order_id}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == order_id
    assert body["customer_id"] == customer_id
    assert body["status"] == "PENDING"
    assert [(i["product_id"], i["quantity"]) for i in body["items"]] == [(p1, 2), (p2, 1)]
    assert [float(i["unit_price"]) for i in body["items"]] == [9.99, 3.5]

    assert [str(e.order_id) for e in events] == [order_id]


def test_create_order_unknown_customer(test_client: TestClient, api_store):
    p1 = _create_product(test_client, "Notebook", "9.99")

    response = test_client.post(
        "/api/v1/orders",
        json={"customer_id": str(uuid4()), "items": [{"product_id": p1, "quantity": 1}]},
    )

    assert response.status_code == 404
    assert "Customer not found" in response.json()["detail"]
    assert api_store.orders == {}


def test_create_order_unknown_product(test_client: TestClient, api_store):
    customer_id = _create_customer(test_client)
    missing = str(uuid4())

    response = test_client.post(
        "/api/v1/orders",
        json={"customer_id": customer_id, "items": [{"product_id": missing, "quantity": 1}]},
    )

    assert response.status_code == 404
    assert missing in response.json()["detail"]
    assert api_store.orders == {}


def test_create_order_rejects_zero_quantity(test_client: TestClient):
    customer_id = _create_customer(test_client)
    p1 = _create_product(test_client, "Notebook", "9.99")

    response = test_client.post(
        "/api/v1/orders",
        json={"customer_id": customer_id, "items": [{"product_id": p1, "quantity": 0}]},
    )

    assert response.status_code == 422


def test_create_customer_invalid_email(test_client: TestClient, api_store):
    response = test_client.post("/api/v1/customers", json={"name": "Nobody", "email": "nobody"})

    assert response.status_code == 400
    assert "Invalid email" in response.json()["detail"]
    assert api_store.customers == {}


def test_get_customer_and_product(test_client: TestClient):
    customer_id = _create_customer(test_client, email="grace@example.com")
    product_id = _create_product(test_client, "Stapler", "12.50")

    customer = test_client.get(f"/api/v1/customers/{customer_id}").json()
    product = test_client.get(f"/api/v1/products/{product_id}").json()

    assert customer["email"] == "grace@example.com"
    assert product["name"] == "Stapler"
    assert product["currency"] == "USD"


def test_get_order_not_found(test_client: TestClient):
    response = test_client.get(f"/api/v1/orders/{uuid4()}")

    assert response.status_code == 404


def test_get_order_invalid_id(test_client: TestClient):
    response = test_client.get("/api/v1/orders/not-a-uuid")

    assert response.status_code == 404


def test_get_unknown_customer_and_product(test_client: TestClient):
    assert test_client.get(f"/api/v1/customers/{uuid4()}").status_code == 404
    assert test_client.get("/api/v1/products/bogus").status_code == 404


def test_overlong_names_are_rejected(test_client: TestClient, api_store):
    too_long = "x" * 256

    customer = test_client.post("/api/v1/customers", json={"name": too_long, "email": "a@b.c"})
    product = test_client.post("/api/v1/products", json={"name": too_long, "price": "1.00"})
    email = test_client.post(
        "/api/v1/customers", json={"name": "Ada", "email": "a@" + "b" * 254}
    )

    assert customer.status_code == 422
    assert product.status_code == 422
    assert email.status_code == 422
    assert api_store.customers == {}
    assert api_store.products == {}


def test_price_precision_is_kept(test_client: TestClient):
    product_id = _create_product(test_client, "Gadget", "9.999")

    product = test_client.get(f"/api/v1/products/{product_id}").json()

    assert product["price"] == "9.999"
