from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from decimal import Decimal

from domain.schemas.menu_schemas import MenuItemResponse


class SelectItemRequest(BaseModel):
    """Schema for choosing an item for one order category"""

    name: str = Field(..., min_length=1, description="Catalog name of the item, e.g. 'pasta'")


class FormattedTotals(BaseModel):
    """Order totals rendered as currency strings"""

    subtotal: str
    tax: str
    total: str


class OrderSummaryResponse(BaseModel):
    """Schema for an order's selections and totals"""

    order_id: UUID
    entree: Optional[MenuItemResponse] = None
    side: Optional[MenuItemResponse] = None
    accompaniment: Optional[MenuItemResponse] = None
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    tax_rate: Decimal
    formatted: FormattedTotals
