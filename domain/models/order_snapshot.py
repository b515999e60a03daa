"""
OrderSnapshot - immutable copy of an order's selections and totals.
Handed to change listeners and mappers so nobody reads a live, mutable order.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from domain.enums import Category
from domain.models.menu_item import MenuItem


class OrderSnapshot(BaseModel):
    """Point-in-time view of an order after a completed operation."""

    entree: Optional[MenuItem] = None
    side: Optional[MenuItem] = None
    accompaniment: Optional[MenuItem] = None
    subtotal: Decimal = Decimal("0.00")
    tax: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")

    model_config = ConfigDict(frozen=True)

    def selection(self, category: Category) -> Optional[MenuItem]:
        return getattr(self, category.value)

    @property
    def is_empty(self) -> bool:
        return self.entree is None and self.side is None and self.accompaniment is None
