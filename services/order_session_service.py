"""In-memory registry of open orders, one OrderState per order id"""

import logging
import threading
from contextlib import contextmanager
from decimal import Decimal
from typing import Dict, Iterator, Optional, Tuple
from uuid import UUID, uuid4

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from repositories.menu_repository import MenuCatalog
from services.order_service import OrderState

logger = logging.getLogger("lunchtray.sessions")


class OrderSessionRegistry:
    """
    Owns the open orders of the running process.

    OrderState itself is single-owner; the registry serializes access by
    holding a per-order lock for the duration of `session()`.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        tax_rate: Optional[Decimal] = None,
        max_open_orders: Optional[int] = None,
    ):
        self.catalog = catalog
        self.tax_rate = settings.tax_rate if tax_rate is None else Decimal(str(tax_rate))
        self.max_open_orders = (
            settings.max_open_orders if max_open_orders is None else max_open_orders
        )
        self._orders: Dict[UUID, OrderState] = {}
        self._locks: Dict[UUID, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create(self) -> Tuple[UUID, OrderState]:
        """
        Open a new, empty order.

        Raises:
            ServiceValidationError: If the open-order limit has been reached
        """
        with self._registry_lock:
            if len(self._orders) >= self.max_open_orders:
                raise ServiceValidationError(
                    "Too many open orders",
                    details={"max_open_orders": self.max_open_orders},
                    code="ORDER_LIMIT_REACHED",
                )
            order_id = uuid4()
            order = OrderState(self.catalog, tax_rate=self.tax_rate)
            self._orders[order_id] = order
            self._locks[order_id] = threading.Lock()
        logger.info(f"Opened order {order_id}")
        return order_id, order

    def get(self, order_id: UUID) -> OrderState:
        with self._registry_lock:
            order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found", details={"order_id": str(order_id)})
        return order

    @contextmanager
    def session(self, order_id: UUID) -> Iterator[OrderState]:
        """Yield an order while holding its lock"""
        with self._registry_lock:
            order = self._orders.get(order_id)
            lock = self._locks.get(order_id)
        if order is None or lock is None:
            raise NotFoundError(f"Order {order_id} not found", details={"order_id": str(order_id)})
        with lock:
            yield order

    def discard(self, order_id: UUID) -> None:
        """Drop an order; it can no longer be read or changed"""
        with self._registry_lock:
            order = self._orders.pop(order_id, None)
            self._locks.pop(order_id, None)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found", details={"order_id": str(order_id)})
        logger.info(f"Discarded order {order_id}")

    def __contains__(self, order_id: UUID) -> bool:
        with self._registry_lock:
            return order_id in self._orders

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._orders)
