"""Order building routes"""

from fastapi import APIRouter, Depends, Response, status
import logging
from uuid import UUID

from api.dependencies import get_order_registry
from domain.enums import Category
from domain.mappers import OrderMapper
from domain.schemas.order_schemas import OrderSummaryResponse, SelectItemRequest
from services.order_session_service import OrderSessionRegistry

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger("lunchtray.api.orders")


@router.post("", response_model=OrderSummaryResponse, status_code=status.HTTP_201_CREATED)
def create_order(registry: OrderSessionRegistry = Depends(get_order_registry)):
    """
    Open a new, empty order.

    Returns:
        OrderSummaryResponse with no selections and zero totals

    Raises:
        400: If the open-order limit has been reached
    """
    order_id, order = registry.create()
    return OrderMapper.to_response(order_id, order.snapshot(), order.tax_rate)


@router.get("/{order_id}", response_model=OrderSummaryResponse)
def get_order(order_id: UUID, registry: OrderSessionRegistry = Depends(get_order_registry)):
    """Return the current selections and totals of an order."""
    with registry.session(order_id) as order:
        return OrderMapper.to_response(order_id, order.snapshot(), order.tax_rate)


@router.put("/{order_id}/{category}", response_model=OrderSummaryResponse)
def select_item(
    order_id: UUID,
    category: Category,
    payload: SelectItemRequest,
    registry: OrderSessionRegistry = Depends(get_order_registry),
):
    """
    Select or replace the item for one category of an order.

    Args:
        order_id: Order to change
        category: entree, side or accompaniment
        payload: Catalog name of the item

    Returns:
        OrderSummaryResponse reflecting the new selection

    Raises:
        404: If the order does not exist or the item is not on the menu
        422: If the category is not valid
    """
    with registry.session(order_id) as order:
        order.select(category, payload.name)
        logger.debug(f"Order {order_id}: {category.value} set to '{payload.name}'")
        return OrderMapper.to_response(order_id, order.snapshot(), order.tax_rate)


@router.post("/{order_id}/reset", response_model=OrderSummaryResponse)
def reset_order(order_id: UUID, registry: OrderSessionRegistry = Depends(get_order_registry)):
    """Clear all selections of an order."""
    with registry.session(order_id) as order:
        order.reset_order()
        return OrderMapper.to_response(order_id, order.snapshot(), order.tax_rate)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def discard_order(order_id: UUID, registry: OrderSessionRegistry = Depends(get_order_registry)):
    """Discard an order once it is submitted or cancelled."""
    registry.discard(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
