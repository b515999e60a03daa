"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from app.config import settings
from api.dependencies import get_catalog, get_order_registry
from repositories.menu_repository import MenuCatalog
from services.order_session_service import OrderSessionRegistry

router = APIRouter(tags=["Health"])
logger = logging.getLogger("lunchtray.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": settings.app_name}


@router.get("/health-check/details")
def health_details(
    catalog: MenuCatalog = Depends(get_catalog),
    registry: OrderSessionRegistry = Depends(get_order_registry),
):
    """Menu size and number of open orders"""
    return {
        "status": "ok",
        "menu_items": len(catalog),
        "open_orders": len(registry),
        "tax_rate": str(registry.tax_rate),
    }
