"""Time slot, special event and operating hours models"""

from datetime import datetime
from sqlalchemy import Column, Integer, SmallInteger, String, Boolean, Date, Time, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from tavola.database import Base


class SpecialEvent(Base):
    """Date-ranged promotion or capacity override (holidays, live music)"""
    __tablename__ = "special_events"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    start_time = Column(Time)
    end_time = Column(Time)
    capacity = Column(Integer)
    is_public = Column(Boolean, default=True, nullable=False)
    is_fully_booked = Column(Boolean, default=False, nullable=False)
    image_url = Column(String(255))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    time_slots = relationship("TimeSlot", back_populates="special_event", passive_deletes=True)
    reservations = relationship("Reservation", back_populates="special_event", passive_deletes=True)


class TimeSlot(Base):
    """Recurring bookable window"""
    __tablename__ = "time_slots"

    id = Column(Integer, primary_key=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    day_of_week = Column(SmallInteger, nullable=False, index=True)  # 0=Sunday, 1=Monday, etc.
    max_reservations = Column(Integer, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    special_event_id = Column(Integer, ForeignKey("special_events.id", ondelete="SET NULL"))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    special_event = relationship("SpecialEvent", back_populates="time_slots")


class OperatingHours(Base):
    """Opening hours per weekday, with optional holiday overrides"""
    __tablename__ = "operating_hours"

    id = Column(Integer, primary_key=True)
    day_of_week = Column(SmallInteger, nullable=False)  # 0=Sunday, 1=Monday, etc.
    open_time = Column(Time, nullable=False)
    close_time = Column(Time, nullable=False)
    is_closed = Column(Boolean, default=False, nullable=False)
    is_special_hours = Column(Boolean, default=False, nullable=False)
    special_date = Column(Date)
    meal_period = Column(String(20))  # breakfast, lunch, dinner
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
