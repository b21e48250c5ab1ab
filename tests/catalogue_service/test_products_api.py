import pytest

LOCAL_ONLY = "Local data only - Price and stock not available at creation"
UNAVAILABLE = "Data Unavailable - External service error"


def test_create_product_returns_local_only_entry(client, inventory):
    resp = client.post("/api/products", json={"name": "Widget", "description": "A thing"})

    assert resp.status_code == 201
    body = resp.json()
    assert body == {
        "id": body["id"],
        "name": "Widget",
        "description": "A thing",
        "price": None,
        "stock": None,
        "dataStatus": LOCAL_ONLY,
    }
    assert resp.headers["Location"] == f"/api/products/{body['id']}"
    assert inventory.requests == []


def test_create_assigns_fresh_ids(make_product):
    ids = [make_product(name=f"Item {i}")["id"] for i in range(3)]
    assert len(set(ids)) == 3


@pytest.mark.parametrize(
    "payload, field, message",
    [
        ({"name": "", "description": "A thing"}, "name", "Product name is required"),
        ({"description": "A thing"}, "name", "Product name is required"),
        ({"name": "x" * 201, "description": "A thing"}, "name", "Name must be between 1 and 200 characters"),
        ({"name": "Widget", "description": ""}, "description", "Product description is required"),
        ({"name": "Widget", "description": "d" * 2001}, "description", "Description must be between 1 and 2000 characters"),
    ],
)
def test_create_rejects_invalid_payload_without_writing(client, payload, field, message):
    resp = client.post("/api/products", json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == 400
    assert body["errors"][field] == [message]
    assert client.get("/api/products").json() == []


def test_create_reports_every_invalid_field(client):
    resp = client.post("/api/products", json={"name": "  ", "description": None})

    assert resp.status_code == 400
    assert set(resp.json()["errors"]) == {"name", "description"}


def test_create_accepts_boundary_lengths(client):
    resp = client.post("/api/products", json={"name": "x" * 200, "description": "d" * 2000})
    assert resp.status_code == 201


def test_malformed_body_is_a_validation_failure(client):
    resp = client.post("/api/products", content=b"not json", headers={"content-type": "application/json"})

    assert resp.status_code == 400
    assert "errors" in resp.json()


def test_get_product_with_live_inventory(client, inventory, make_product):
    created = make_product()

    resp = client.get(f"/api/products/{created['id']}")

    assert resp.status_code == 200
    assert resp.json() == {
        "id": created["id"],
        "name": "Widget",
        "description": "A thing",
        "price": 9.99,
        "stock": 5,
        "dataStatus": "Live",
    }
    assert inventory.requested_ids == [created["id"]]


@pytest.mark.parametrize(
    "mode", ["error", "not_found", "malformed", "timeout", "connect_error", "huge_price", "crash"]
)
def test_get_product_degrades_when_inventory_fails(client, inventory, make_product, mode):
    created = make_product()
    inventory.mode = mode

    resp = client.get(f"/api/products/{created['id']}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["price"] is None
    assert body["stock"] is None
    assert body["dataStatus"] == UNAVAILABLE


def test_get_unknown_product_is_not_found(client, inventory):
    resp = client.get("/api/products/999")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Product with ID 999 not found"}
    assert inventory.requests == []


def test_get_with_non_numeric_id_is_bad_request(client):
    resp = client.get("/api/products/abc")
    assert resp.status_code == 400


def test_list_products_enriches_each_in_order(client, inventory, make_product):
    ids = [make_product(name=name)["id"] for name in ("First", "Second", "Third")]
    inventory.requests.clear()

    resp = client.get("/api/products")

    assert resp.status_code == 200
    body = resp.json()
    assert [entry["id"] for entry in body] == ids
    assert [entry["name"] for entry in body] == ["First", "Second", "Third"]
    assert all(entry["dataStatus"] == "Live" for entry in body)
    assert inventory.requested_ids == ids


def test_list_products_uses_short_status_when_inventory_fails(client, inventory, make_product):
    make_product(name="First")
    make_product(name="Second")
    inventory.mode = "error"
    inventory.requests.clear()

    body = client.get("/api/products").json()

    assert len(inventory.requests) == 2
    for entry in body:
        assert entry["dataStatus"] == "Data Unavailable"
        assert entry["price"] is None
        assert entry["stock"] is None


def test_list_products_empty(client, inventory):
    resp = client.get("/api/products")

    assert resp.status_code == 200
    assert resp.json() == []
    assert inventory.requests == []


def test_widget_scenario(client, inventory):
    created = client.post("/api/products", json={"name": "Widget", "description": "A thing"})
    assert created.status_code == 201
    assert created.json()["dataStatus"] == LOCAL_ONLY
    product_id = created.json()["id"]

    live = client.get(f"/api/products/{product_id}")
    assert live.status_code == 200
    assert live.json() == {
        "id": product_id,
        "name": "Widget",
        "description": "A thing",
        "price": 9.99,
        "stock": 5,
        "dataStatus": "Live",
    }

    inventory.mode = "error"
    degraded = client.get(f"/api/products/{product_id}")
    assert degraded.status_code == 200
    assert degraded.json() == {
        "id": product_id,
        "name": "Widget",
        "description": "A thing",
        "price": None,
        "stock": None,
        "dataStatus": UNAVAILABLE,
    }


def test_non_ascii_correlation_id_still_returns_product(client, make_product):
    created = make_product()

    resp = client.get(
        f"/api/products/{created['id']}",
        headers={"X-Correlation-ID": "café".encode("latin-1")},
    )

    assert resp.status_code == 200
    assert resp.json()["dataStatus"] == UNAVAILABLE


def test_list_with_non_ascii_correlation_id(client, make_product):
    make_product()

    resp = client.get("/api/products", headers={"X-Correlation-ID": "café".encode("latin-1")})

    assert resp.status_code == 200
    assert [entry["dataStatus"] for entry in resp.json()] == ["Data Unavailable"]


@pytest.mark.parametrize("product_id", ["99999999999999999999", str(2**31), str(-(2**31) - 1)])
def test_out_of_range_product_id_is_bad_request(client, inventory, product_id):
    resp = client.get(f"/api/products/{product_id}")

    assert resp.status_code == 400
    assert "product_id" in resp.json()["errors"]
    assert inventory.requests == []


def test_largest_product_id_is_not_found(client):
    resp = client.get(f"/api/products/{2**31 - 1}")

    assert resp.status_code == 404
    assert resp.json() == {"message": f"Product with ID {2**31 - 1} not found"}
