"""Menu schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import field_serializer

from tavola.models.menu import MenuItemType
from tavola.schemas.common import APIModel, Envelope


class MenuCategoryResponse(APIModel):
    """Menu category response"""
    id: int
    name: str
    description: Optional[str]
    display_order: int
    is_active: bool
    image_url: Optional[str]


class MenuItemResponse(APIModel):
    """Menu item response"""
    id: int
    category_id: int
    name: str
    description: Optional[str]
    price: Decimal
    type: MenuItemType
    image_url: Optional[str]
    ingredients: Optional[List[str]]
    allergens: Optional[List[str]]
    nutritional_info: Optional[Dict[str, Any]]
    is_spicy: bool
    is_vegetarian: bool
    is_vegan: bool
    is_gluten_free: bool
    is_available: bool
    is_featured: bool
    prep_time: Optional[int]
    created_at: datetime
    updated_at: datetime

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> str:
        return f"{price:.2f}"


class MenuCategoryListEnvelope(Envelope):
    count: int
    categories: List[MenuCategoryResponse]


class MenuItemEnvelope(Envelope):
    item: MenuItemResponse


class MenuItemListEnvelope(Envelope):
    count: int
    items: List[MenuItemResponse]
