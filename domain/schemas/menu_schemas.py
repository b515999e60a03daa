from pydantic import BaseModel, Field
from typing import Optional, List
from decimal import Decimal

from domain.enums import Category


class MenuItemResponse(BaseModel):
    """Schema for a single menu item"""

    key: str
    name: str
    description: Optional[str] = None
    price: Decimal
    category: Category

    model_config = {"from_attributes": True}


class MenuResponse(BaseModel):
    """Full menu grouped by category"""

    entree: List[MenuItemResponse] = Field(default_factory=list)
    side: List[MenuItemResponse] = Field(default_factory=list)
    accompaniment: List[MenuItemResponse] = Field(default_factory=list)
