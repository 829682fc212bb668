"""Restaurant settings model"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, UniqueConstraint

from tavola.database import Base


class RestaurantSetting(Base):
    """Key/value settings grouped by category (contact, policies, about)"""
    __tablename__ = "restaurant_settings"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    value = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    description = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("category", "name", name="uq_restaurant_settings_category_name"),
    )
