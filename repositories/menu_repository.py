"""
Menu catalog repository.
Read-only lookup of menu items by category and catalog name.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from app.exceptions import CatalogLookupError, ServiceValidationError
from domain.enums import Category
from domain.menu_data import default_menu_items
from domain.models.menu_item import MenuItem

logger = logging.getLogger("lunchtray.menu")


def _normalize(name: str) -> str:
    return name.strip().lower()


class MenuCatalog:
    """
    In-memory menu catalog keyed by (category, key).

    The catalog is fixed once built; there are no write operations.
    """

    def __init__(self, items: Iterable[MenuItem]):
        self._items: dict[Tuple[Category, str], MenuItem] = {}
        for item in items:
            index = (item.category, _normalize(item.key))
            if index in self._items:
                raise ServiceValidationError(
                    f"Duplicate {item.category.value} '{item.key}' in menu",
                    details={"category": item.category.value, "key": item.key},
                )
            self._items[index] = item
        logger.debug(f"Menu catalog loaded with {len(self._items)} items")

    @classmethod
    def default(cls) -> "MenuCatalog":
        """Build the catalog from the built-in menu."""
        return cls(default_menu_items())

    def lookup(self, category: Category, name: str) -> MenuItem:
        """
        Resolve a catalog name within a category.

        Args:
            category: Category to search
            name: Catalog key (case and surrounding whitespace are ignored)

        Returns:
            The matching MenuItem

        Raises:
            CatalogLookupError: If no item with that name exists in the category
        """
        category = Category(category)
        item = self.find(category, name)
        if item is None:
            logger.warning(f"Menu lookup failed: category={category.value} name={name!r}")
            raise CatalogLookupError(category.value, name)
        return item

    def find(self, category: Category, name: str) -> Optional[MenuItem]:
        """Like lookup() but returns None instead of raising"""
        category = Category(category)
        return self._items.get((category, _normalize(name)))

    def items(self, category: Category) -> List[MenuItem]:
        """Items of one category in menu order"""
        return [item for (cat, _), item in self._items.items() if cat == category]

    def categories(self) -> List[Category]:
        """Categories that have at least one item, in enum order"""
        present = {cat for cat, _ in self._items}
        return [cat for cat in Category if cat in present]

    def __contains__(self, entry) -> bool:
        category, name = entry
        return self.find(category, name) is not None

    def __len__(self) -> int:
        return len(self._items)
