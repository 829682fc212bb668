"""Reservation and reservation history models"""

from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    SmallInteger,
    String,
    Boolean,
    Date,
    Time,
    DateTime,
    Enum,
    ForeignKey,
    Text,
    JSON,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
import enum

from tavola.database import Base


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle states"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SEATED = "seated"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


# Statuses that hold a table at a given date and time
OCCUPYING_STATUSES = (ReservationStatus.PENDING, ReservationStatus.CONFIRMED)

# Lifecycle end states
TERMINAL_STATUSES = (
    ReservationStatus.COMPLETED,
    ReservationStatus.CANCELLED,
    ReservationStatus.NO_SHOW,
)


def _status_enum(name: str) -> Enum:
    return Enum(
        ReservationStatus,
        name=name,
        values_callable=lambda e: [m.value for m in e],
    )


class Reservation(Base):
    """Guest table reservations"""
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)

    # Guest information
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)

    # Booking details
    date = Column(Date, nullable=False, index=True)
    time = Column(Time, nullable=False)
    end_time = Column(Time)
    guests = Column(SmallInteger, nullable=False)
    status = Column(_status_enum("reservation_status"), default=ReservationStatus.PENDING, nullable=False)
    special_requests = Column(Text)
    occasion = Column(String(100))

    assigned_table_id = Column(Integer, ForeignKey("restaurant_tables.id", ondelete="SET NULL"))
    special_event_id = Column(Integer, ForeignKey("special_events.id", ondelete="SET NULL"))

    estimated_duration = Column(SmallInteger, default=90)  # minutes
    arrival_time = Column(DateTime)
    departure_time = Column(DateTime)
    reminder_sent = Column(Boolean, default=False, nullable=False)

    confirmation_code = Column(String(20), unique=True, nullable=False)
    source = Column(String(50), default="website")

    # {"selectedItems": [...], "dietaryRestrictions": [...], "preOrderItems": [...]}
    menu_preferences = Column(JSON)

    # Optimistic concurrency counter
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="reservations")
    table = relationship("RestaurantTable", back_populates="reservations")
    special_event = relationship("SpecialEvent", back_populates="reservations")
    history = relationship(
        "ReservationHistory",
        back_populates="reservation",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ReservationHistory.id",
    )

    __table_args__ = (
        CheckConstraint("guests >= 1", name="ck_reservations_guests_positive"),
    )

    __mapper_args__ = {"version_id_col": version}


class ReservationHistory(Base):
    """Append-only audit trail of reservation status changes"""
    __tablename__ = "reservation_history"

    id = Column(Integer, primary_key=True)
    reservation_id = Column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    previous_status = Column(_status_enum("reservation_status"), nullable=False)
    new_status = Column(_status_enum("reservation_status"), nullable=False)
    changed_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))
    reason = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    reservation = relationship("Reservation", back_populates="history")
