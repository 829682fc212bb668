"""Walk-in waitlist model"""

from datetime import datetime
from sqlalchemy import Column, Integer, SmallInteger, String, Boolean, DateTime, Enum, Text
import enum

from tavola.database import Base


class WaitlistStatus(str, enum.Enum):
    WAITING = "waiting"
    NOTIFIED = "notified"
    SEATED = "seated"
    LEFT = "left"
    CANCELLED = "cancelled"


class WaitlistEntry(Base):
    """Walk-in queue record"""
    __tablename__ = "waitlist"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(255))
    party_size = Column(SmallInteger, nullable=False)
    estimated_wait_time = Column(SmallInteger)  # minutes
    notification_sent = Column(Boolean, default=False, nullable=False)
    status = Column(
        Enum(WaitlistStatus, name="waitlist_status", values_callable=lambda e: [m.value for m in e]),
        default=WaitlistStatus.WAITING,
        nullable=False,
        index=True,
    )
    notes = Column(Text)
    check_in_time = Column(DateTime, default=datetime.utcnow, nullable=False)
    seated_time = Column(DateTime)
    left_time = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
