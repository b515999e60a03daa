"""
API dependencies for dependency injection
"""

from repositories.menu_repository import MenuCatalog
from services.order_session_service import OrderSessionRegistry

_catalog = MenuCatalog.default()
_order_registry = OrderSessionRegistry(_catalog)


def get_catalog() -> MenuCatalog:
    """
    Menu catalog dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(catalog: MenuCatalog = Depends(get_catalog)):
            pass
    """
    return _catalog


def get_order_registry() -> OrderSessionRegistry:
    """Open-order registry shared by all order routes"""
    return _order_registry
