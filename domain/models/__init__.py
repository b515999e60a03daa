"""
Domain models package - immutable menu and order value objects.
"""

from domain.models.menu_item import MenuItem
from domain.models.order_snapshot import OrderSnapshot

__all__ = [
    "MenuItem",
    "OrderSnapshot",
]
