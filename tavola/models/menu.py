"""Menu-related models"""

from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    SmallInteger,
    String,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    JSON,
    Numeric,
    Text,
)
from sqlalchemy.orm import relationship
import enum

from tavola.database import Base


class MenuItemType(str, enum.Enum):
    STARTER = "starter"
    MAIN = "main"
    DESSERT = "dessert"
    DRINK = "drink"
    SPECIAL = "special"


class MenuCategory(Base):
    """Menu sections"""
    __tablename__ = "menu_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    image_url = Column(String(255))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    items = relationship("MenuItem", back_populates="category", cascade="all, delete-orphan", passive_deletes=True)


class MenuItem(Base):
    """Menu items"""
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True)
    category_id = Column(Integer, ForeignKey("menu_categories.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    type = Column(
        Enum(MenuItemType, name="menu_item_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    image_url = Column(String(255))
    ingredients = Column(JSON, default=list)
    allergens = Column(JSON, default=list)  # ["nuts", "dairy", etc.]
    nutritional_info = Column(JSON)  # {"calories": 0, "protein": 0, ...}
    is_spicy = Column(Boolean, default=False, nullable=False)
    is_vegetarian = Column(Boolean, default=False, nullable=False)
    is_vegan = Column(Boolean, default=False, nullable=False)
    is_gluten_free = Column(Boolean, default=False, nullable=False)
    is_available = Column(Boolean, default=True, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    prep_time = Column(SmallInteger)  # minutes
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    category = relationship("MenuCategory", back_populates="items")
