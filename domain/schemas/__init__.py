"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.menu_schemas import MenuItemResponse, MenuResponse
from domain.schemas.order_schemas import (
    SelectItemRequest,
    FormattedTotals,
    OrderSummaryResponse,
)

__all__ = [
    # Menu schemas
    "MenuItemResponse",
    "MenuResponse",
    # Order schemas
    "SelectItemRequest",
    "FormattedTotals",
    "OrderSummaryResponse",
]
