"""API routes package"""

from . import health, menu, orders

__all__ = ["health", "menu", "orders"]
