"""Dining area and table models"""

from datetime import datetime
from sqlalchemy import Column, Integer, SmallInteger, String, Boolean, DateTime, Enum, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship
import enum

from tavola.database import Base


class TableStatus(str, enum.Enum):
    """Physical state of a table on the floor"""
    AVAILABLE = "available"
    RESERVED = "reserved"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class DiningArea(Base):
    """Section of the restaurant (main room, terrace, private room)"""
    __tablename__ = "dining_areas"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    is_active = Column(Boolean, default=True, nullable=False)
    capacity = Column(Integer, nullable=False)
    floor_plan = Column(JSON)  # {"layout": "...", "dimensions": {"width": 0, "height": 0}}
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    tables = relationship(
        "RestaurantTable",
        back_populates="dining_area",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class RestaurantTable(Base):
    """Bookable tables"""
    __tablename__ = "restaurant_tables"

    id = Column(Integer, primary_key=True)
    dining_area_id = Column(
        Integer,
        ForeignKey("dining_areas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    table_number = Column(String(20), unique=True, nullable=False)
    capacity = Column(SmallInteger, nullable=False)
    status = Column(
        Enum(TableStatus, name="table_status", values_callable=lambda e: [m.value for m in e]),
        default=TableStatus.AVAILABLE,
        nullable=False,
    )
    is_active = Column(Boolean, default=True, nullable=False)
    position = Column(JSON)  # {"x": 0, "y": 0}
    shape = Column(String(20), default="rectangle")
    size = Column(JSON)  # {"width": 0, "height": 0}
    metadata_json = Column("metadata", JSON)  # {"isAccessible": true, "isOutdoor": false, ...}
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    dining_area = relationship("DiningArea", back_populates="tables")
    reservations = relationship("Reservation", back_populates="table", passive_deletes=True)
