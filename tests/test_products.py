# tests/test_products.py
HEADERS = {"x-api-key": "12345"}

NEW_PRODUCT = {
    "name": "Desk Lamp",
    "description": "LED lamp with adjustable arm",
    "price": 35,
    "category": "Home",
    "inStock": True,
}


def test_welcome(client):
    r = client.get("/", headers=HEADERS)
    assert r.status_code == 200
    assert r.text.startswith("Welcome to the Product API!")


def test_list_returns_seed_in_insertion_order(client):
    r = client.get("/api/products", headers=HEADERS)
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == ["1", "2", "3"]
    assert r.json()[2] == {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    }


def test_create_then_get(client, store):
    r = client.post("/api/products", json=NEW_PRODUCT, headers=HEADERS)
    assert r.status_code == 201
    created = r.json()
    assert created["id"] not in {"1", "2", "3"}
    assert {k: v for k, v in created.items() if k != "id"} == NEW_PRODUCT
    assert len(store) == 4

    r2 = client.get(f"/api/products/{created['id']}", headers=HEADERS)
    assert r2.status_code == 200
    assert r2.json() == created

    # new products go to the end
    ids = [p["id"] for p in client.get("/api/products", headers=HEADERS).json()]
    assert ids[-1] == created["id"]


def test_create_accepts_zero_price_and_out_of_stock(client):
    body = dict(NEW_PRODUCT, price=0, inStock=False)
    r = client.post("/api/products", json=body, headers=HEADERS)
    assert r.status_code == 201
    assert r.json()["price"] == 0
    assert r.json()["inStock"] is False


def test_create_ignores_client_supplied_id(client):
    r = client.post("/api/products", json=dict(NEW_PRODUCT, id="1"), headers=HEADERS)
    assert r.status_code == 201
    assert r.json()["id"] != "1"


def test_create_missing_field_is_rejected(client, store):
    for field in NEW_PRODUCT:
        body = {k: v for k, v in NEW_PRODUCT.items() if k != field}
        r = client.post("/api/products", json=body, headers=HEADERS)
        assert r.status_code == 400, field
        assert r.json() == {"error": "ValidationError", "message": "Missing required product fields"}
    assert len(store) == 3


def test_create_null_or_empty_counts_as_missing(client, store):
    for body in (dict(NEW_PRODUCT, price=None), dict(NEW_PRODUCT, inStock=None), dict(NEW_PRODUCT, name="")):
        r = client.post("/api/products", json=body, headers=HEADERS)
        assert r.status_code == 400
        assert r.json()["message"] == "Missing required product fields"
    assert len(store) == 3


def test_get_unknown_id(client):
    r = client.get("/api/products/does-not-exist", headers=HEADERS)
    assert r.status_code == 404
    assert r.json() == {"error": "NotFoundError", "message": "Product not found"}


def test_update_changes_only_given_fields(client):
    before = client.get("/api/products/1", headers=HEADERS).json()
    r = client.put("/api/products/1", json={"price": 999}, headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == dict(before, price=999)
    assert client.get("/api/products/1", headers=HEADERS).json() == dict(before, price=999)


def test_update_full_body(client):
    r = client.put("/api/products/3", json=dict(NEW_PRODUCT, id="other"), headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == dict(NEW_PRODUCT, id="3")


def test_update_unknown_id(client):
    r = client.put("/api/products/nope", json={"price": 1}, headers=HEADERS)
    assert r.status_code == 404
    assert r.json()["error"] == "NotFoundError"


def test_update_rejects_empty_or_null(client):
    r = client.put("/api/products/1", json={}, headers=HEADERS)
    assert r.status_code == 400
    assert r.json()["error"] == "ValidationError"

    r = client.put("/api/products/1", json={"name": None}, headers=HEADERS)
    assert r.status_code == 400
    assert client.get("/api/products/1", headers=HEADERS).json()["name"] == "Laptop"


def test_delete(client, store):
    r = client.delete("/api/products/2", headers=HEADERS)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Product deleted"
    assert body["product"]["id"] == "2"
    assert body["product"]["name"] == "Smartphone"
    assert len(store) == 2

    assert client.get("/api/products/2", headers=HEADERS).status_code == 404
    assert client.delete("/api/products/2", headers=HEADERS).status_code == 404


def test_search(client):
    r = client.get("/api/products", params={"search": "phone"}, headers=HEADERS)
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Smartphone"]

    # description matches too, case-insensitively
    r = client.get("/api/products", params={"search": "TIMER"}, headers=HEADERS)
    assert [p["id"] for p in r.json()] == ["3"]


def test_category_with_pagination(client):
    r = client.get("/api/products", params={"category": "electronics", "page": 1, "limit": 1}, headers=HEADERS)
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Laptop"]

    r = client.get("/api/products", params={"category": "ELECTRONICS", "page": 2, "limit": 1}, headers=HEADERS)
    assert [p["name"] for p in r.json()] == ["Smartphone"]


def test_bad_pagination_values_fall_back_to_defaults(client):
    r = client.get("/api/products", params={"page": "abc", "limit": "xyz"}, headers=HEADERS)
    assert r.status_code == 200
    assert len(r.json()) == 3

    r = client.get("/api/products", params={"page": 10, "limit": 2}, headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == []


def test_stats(client):
    r = client.get("/api/products/stats", headers=HEADERS)
    assert r.status_code == 200
    assert r.json() == {"totalProducts": 3, "categories": {"electronics": 2, "kitchen": 1}}


def test_stats_route_is_not_shadowed_by_id_route(client):
    # "stats" must never be looked up as a product id
    r = client.get("/api/products/stats", headers=HEADERS)
    assert "totalProducts" in r.json()


def test_stats_follow_writes(client):
    client.post("/api/products", json=NEW_PRODUCT, headers=HEADERS)
    client.delete("/api/products/3", headers=HEADERS)
    r = client.get("/api/products/stats", headers=HEADERS)
    assert r.json() == {"totalProducts": 3, "categories": {"electronics": 2, "home": 1}}


def test_reads_are_repeatable(client):
    first = client.get("/api/products/1", headers=HEADERS).json()
    stats = client.get("/api/products/stats", headers=HEADERS).json()
    for _ in range(3):
        assert client.get("/api/products/1", headers=HEADERS).json() == first
        assert client.get("/api/products/stats", headers=HEADERS).json() == stats


def test_create_rejects_values_of_the_wrong_type(client, store):
    for field, value in (("price", True), ("price", "12"), ("inStock", "yes"), ("inStock", 1), ("name", 7)):
        r = client.post("/api/products", json=dict(NEW_PRODUCT, **{field: value}), headers=HEADERS)
        assert r.status_code == 400, (field, value)
        assert r.json() == {"error": "ValidationError", "message": f"Invalid product fields: {field}"}
    assert len(store) == 3


def test_create_stores_values_as_sent(client):
    for price in (9.5, 0, -3):
        r = client.post("/api/products", json=dict(NEW_PRODUCT, price=price), headers=HEADERS)
        assert r.status_code == 201
        stored = client.get(f"/api/products/{r.json()['id']}", headers=HEADERS).json()
        assert stored["price"] == price
        assert type(stored["price"]) is type(price)


def test_update_rejects_values_of_the_wrong_type(client):
    for field, value in (("price", True), ("price", "12"), ("inStock", "yes"), ("inStock", 0)):
        r = client.put("/api/products/1", json={field: value}, headers=HEADERS)
        assert r.status_code == 400, (field, value)
        assert r.json()["message"] == f"Invalid product fields: {field}"
    laptop = client.get("/api/products/1", headers=HEADERS).json()
    assert laptop["price"] == 1200
    assert laptop["inStock"] is True


def test_update_stores_values_as_sent(client):
    r = client.put("/api/products/1", json={"price": 9.5, "inStock": False}, headers=HEADERS)
    assert r.status_code == 200
    laptop = client.get("/api/products/1", headers=HEADERS).json()
    assert laptop["price"] == 9.5
    assert laptop["inStock"] is False

    client.put("/api/products/1", json={"price": 0}, headers=HEADERS)
    price = client.get("/api/products/1", headers=HEADERS).json()["price"]
    assert price == 0
    assert type(price) is int
