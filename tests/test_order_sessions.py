"""
Tests for OrderSessionRegistry - open orders kept by the API layer.
"""

import threading
import uuid
from decimal import Decimal

import pytest

from app.exceptions import NotFoundError, ServiceValidationError
from services.order_session_service import OrderSessionRegistry
from test_fixtures import catalog


@pytest.fixture
def registry(catalog) -> OrderSessionRegistry:
    return OrderSessionRegistry(catalog, tax_rate=Decimal("0.08"), max_open_orders=3)


def test_create_returns_empty_order(registry: OrderSessionRegistry):
    order_id, order = registry.create()

    assert order_id in registry
    assert order.entree is None
    assert order.subtotal == 0
    assert order.tax_rate == Decimal("0.08")
    assert registry.get(order_id) is order


def test_orders_are_independent(registry: OrderSessionRegistry):
    first_id, first = registry.create()
    second_id, second = registry.create()

    first.set_entree("pizza")

    assert first_id != second_id
    assert second.entree is None
    assert second.subtotal == 0


def test_session_yields_order(registry: OrderSessionRegistry):
    order_id, order = registry.create()

    with registry.session(order_id) as held:
        held.set_side("fries")

    assert held is order
    assert order.subtotal == Decimal("2.00")


def test_unknown_order_not_found(registry: OrderSessionRegistry):
    missing = uuid.uuid4()

    with pytest.raises(NotFoundError):
        registry.get(missing)
    with pytest.raises(NotFoundError):
        with registry.session(missing):
            pass
    with pytest.raises(NotFoundError):
        registry.discard(missing)


def test_discard_removes_order(registry: OrderSessionRegistry):
    order_id, _ = registry.create()

    registry.discard(order_id)

    assert order_id not in registry
    assert len(registry) == 0


def test_open_order_limit(registry: OrderSessionRegistry):
    for _ in range(3):
        registry.create()

    with pytest.raises(ServiceValidationError) as exc_info:
        registry.create()

    assert exc_info.value.code == "ORDER_LIMIT_REACHED"


def test_concurrent_sessions_keep_totals_consistent(registry: OrderSessionRegistry):
    order_id, order = registry.create()
    names = ["pizza", "pasta", "burger"]

    mismatches = []

    def worker(offset):
        for i in range(200):
            with registry.session(order_id) as held:
                held.set_entree(names[(i + offset) % len(names)])
                if held.subtotal != held.entree.price:
                    mismatches.append((held.entree.key, held.subtotal))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert mismatches == []
    assert order.subtotal == order.entree.price
    assert order.total == order.subtotal + order.tax


def test_float_tax_rate_is_kept_exact(catalog):
    registry = OrderSessionRegistry(catalog, tax_rate=0.07)
    _, order = registry.create()

    assert registry.tax_rate == Decimal("0.07")
    assert order.tax_rate == Decimal("0.07")
