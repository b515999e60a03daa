"""Domain mappers - transformation between domain objects and DTOs"""

from domain.mappers.order_mapper import OrderMapper

__all__ = ["OrderMapper"]
