"""Menu catalog routes"""

from fastapi import APIRouter, Depends
import logging
from typing import List

from api.dependencies import get_catalog
from domain.enums import Category
from domain.mappers import OrderMapper
from domain.schemas.menu_schemas import MenuItemResponse, MenuResponse
from repositories.menu_repository import MenuCatalog

router = APIRouter(prefix="/menu", tags=["Menu"])
logger = logging.getLogger("lunchtray.api.menu")


@router.get("", response_model=MenuResponse)
def get_menu(catalog: MenuCatalog = Depends(get_catalog)):
    """Return every menu item grouped by category."""
    return OrderMapper.menu_to_response(
        {category: catalog.items(category) for category in Category}
    )


@router.get("/{category}", response_model=List[MenuItemResponse])
def get_menu_category(category: Category, catalog: MenuCatalog = Depends(get_catalog)):
    """Return the items of a single category in menu order."""
    items = catalog.items(category)
    logger.debug(f"Listing {len(items)} {category.value} items")
    return [OrderMapper.item_to_response(item) for item in items]
