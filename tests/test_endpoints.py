"""
API endpoint tests using the FastAPI TestClient against the built-in menu.

Default menu prices used below: pasta 5.50, cauliflower 7.00, salad 2.50,
rice 1.50, bread 0.50.
"""

from decimal import Decimal

from test_fixtures import client


def _open_order() -> str:
    r = client.post("/orders")
    assert r.status_code == 201
    return r.json()["order_id"]


def _totals(body) -> tuple:
    return Decimal(body["subtotal"]), Decimal(body["tax"]), Decimal(body["total"])


def test_health_check():
    r = client.get("/health-check")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert "X-Request-ID" in r.headers


def test_health_details():
    r = client.get("/health-check/details")

    assert r.status_code == 200
    body = r.json()
    assert body["menu_items"] == 11
    assert body["open_orders"] >= 0


def test_get_menu_grouped_by_category():
    r = client.get("/menu")

    assert r.status_code == 200
    body = r.json()
    assert [item["key"] for item in body["entree"]] == ["cauliflower", "chili", "pasta", "skillet"]
    assert len(body["side"]) == 4
    assert len(body["accompaniment"]) == 3
    assert Decimal(body["entree"][0]["price"]) == Decimal("7.00")


def test_get_menu_category():
    r = client.get("/menu/accompaniment")

    assert r.status_code == 200
    assert [item["key"] for item in r.json()] == ["bread", "berries", "pickles"]


def test_create_order_is_empty():
    r = client.post("/orders")

    assert r.status_code == 201
    body = r.json()
    assert body["entree"] is None
    assert body["side"] is None
    assert body["accompaniment"] is None
    assert _totals(body) == (Decimal("0"), Decimal("0"), Decimal("0"))
    assert body["formatted"] == {"subtotal": "$0.00", "tax": "$0.00", "total": "$0.00"}


def test_select_items_updates_totals():
    order_id = _open_order()

    r = client.put(f"/orders/{order_id}/entree", json={"name": "pasta"})
    assert r.status_code == 200
    body = r.json()
    assert body["entree"]["name"] == "Mushroom Pasta"
    assert _totals(body) == (Decimal("5.50"), Decimal("0.44"), Decimal("5.94"))

    r = client.put(f"/orders/{order_id}/side", json={"name": "salad"})
    r = client.put(f"/orders/{order_id}/accompaniment", json={"name": "bread"})
    body = r.json()
    assert _totals(body) == (Decimal("8.50"), Decimal("0.68"), Decimal("9.18"))
    assert body["formatted"]["total"] == "$9.18"


def test_replacing_entree_over_api():
    order_id = _open_order()
    client.put(f"/orders/{order_id}/entree", json={"name": "pasta"})
    client.put(f"/orders/{order_id}/side", json={"name": "rice"})

    r = client.put(f"/orders/{order_id}/entree", json={"name": "cauliflower"})

    body = r.json()
    assert body["entree"]["key"] == "cauliflower"
    assert _totals(body) == (Decimal("8.50"), Decimal("0.68"), Decimal("9.18"))


def test_get_order_reflects_selections():
    order_id = _open_order()
    client.put(f"/orders/{order_id}/side", json={"name": "rice"})

    r = client.get(f"/orders/{order_id}")

    assert r.status_code == 200
    body = r.json()
    assert body["order_id"] == order_id
    assert body["side"]["key"] == "rice"
    assert Decimal(body["subtotal"]) == Decimal("1.50")


def test_reset_order():
    order_id = _open_order()
    client.put(f"/orders/{order_id}/entree", json={"name": "chili"})

    r = client.post(f"/orders/{order_id}/reset")

    assert r.status_code == 200
    body = r.json()
    assert body["entree"] is None
    assert _totals(body) == (Decimal("0"), Decimal("0"), Decimal("0"))


def test_discard_order():
    order_id = _open_order()

    r = client.delete(f"/orders/{order_id}")
    assert r.status_code == 204

    r = client.get(f"/orders/{order_id}")
    assert r.status_code == 404
