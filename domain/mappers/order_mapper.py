"""
Order domain mappers.
Handles transformation between order state and response DTOs.
"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from domain.enums import Category
from domain.models import MenuItem, OrderSnapshot
from domain.schemas.menu_schemas import MenuItemResponse, MenuResponse
from domain.schemas.order_schemas import FormattedTotals, OrderSummaryResponse
from services.formatting import format_currency


class OrderMapper:
    """Mapper for order and menu transformations."""

    @staticmethod
    def item_to_response(item: Optional[MenuItem]) -> Optional[MenuItemResponse]:
        if item is None:
            return None
        return MenuItemResponse.model_validate(item)

    @staticmethod
    def to_response(order_id: UUID, snapshot: OrderSnapshot, tax_rate: Decimal) -> OrderSummaryResponse:
        """
        Convert an order snapshot to OrderSummaryResponse DTO.

        Args:
            order_id: Id of the order in the session registry
            snapshot: Snapshot taken from the OrderState
            tax_rate: Rate the order was priced with

        Returns:
            OrderSummaryResponse DTO with selections, totals and formatted totals
        """
        return OrderSummaryResponse(
            order_id=order_id,
            entree=OrderMapper.item_to_response(snapshot.entree),
            side=OrderMapper.item_to_response(snapshot.side),
            accompaniment=OrderMapper.item_to_response(snapshot.accompaniment),
            subtotal=snapshot.subtotal,
            tax=snapshot.tax,
            total=snapshot.total,
            tax_rate=tax_rate,
            formatted=FormattedTotals(
                subtotal=format_currency(snapshot.subtotal),
                tax=format_currency(snapshot.tax),
                total=format_currency(snapshot.total),
            ),
        )

    @staticmethod
    def menu_to_response(items_by_category: dict[Category, List[MenuItem]]) -> MenuResponse:
        return MenuResponse(
            **{
                category.value: [MenuItemResponse.model_validate(item) for item in items]
                for category, items in items_by_category.items()
            }
        )
