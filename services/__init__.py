"""Services package - Business logic layer"""

from services.order_service import OrderState
from services.order_session_service import OrderSessionRegistry

__all__ = [
    "OrderState",
    "OrderSessionRegistry",
]
