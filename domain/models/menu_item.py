"""
MenuItem model - a single selectable catalog entry.
Items are immutable; orders reference them but never own or change them.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.enums import Category


class MenuItem(BaseModel):
    """
    A priced menu entry belonging to exactly one category.

    `key` is the catalog name used for lookups (e.g. "pasta"); `name` is the
    display name shown to customers (e.g. "Mushroom Pasta").
    """

    key: str = Field(..., min_length=1, description="Catalog lookup name")
    name: str = Field(..., min_length=1, description="Display name")
    description: Optional[str] = Field(None, description="Short menu description")
    price: Decimal = Field(..., ge=0, description="Unit price")
    category: Category

    model_config = ConfigDict(frozen=True, from_attributes=True)

    def __repr__(self):
        return f"<MenuItem(key='{self.key}', category={self.category.value}, price={self.price})>"
