"""User model for guest and staff accounts"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, JSON
from sqlalchemy.orm import relationship
import enum

from tavola.database import Base


class UserRole(str, enum.Enum):
    """User roles for RBAC"""
    CUSTOMER = "customer"
    STAFF = "staff"
    MANAGER = "manager"
    ADMIN = "admin"


ROLE_HIERARCHY = {
    UserRole.CUSTOMER: 1,
    UserRole.STAFF: 2,
    UserRole.MANAGER: 3,
    UserRole.ADMIN: 4,
}


class User(Base):
    """Registered accounts"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)

    # Authentication
    email = Column(String(255), unique=True, nullable=False)
    username = Column(String(100), unique=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Profile
    first_name = Column(String(100))
    last_name = Column(String(100))
    phone_number = Column(String(20))

    # Role
    role = Column(
        Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        default=UserRole.CUSTOMER,
        nullable=False,
    )

    # Status
    is_active = Column(Boolean, default=True, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)

    # Tokens
    verification_token = Column(String(255))
    reset_password_token = Column(String(255))

    # {"dietaryRestrictions": [...], "seatingPreference": "...", "notificationPreferences": {...}}
    preferences = Column(JSON)

    # Timestamps
    last_login = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    reservations = relationship("Reservation", back_populates="user", passive_deletes=True)

    def has_permission(self, required_role: UserRole) -> bool:
        """Check if user has at least the required role level"""
        return ROLE_HIERARCHY.get(self.role, 0) >= ROLE_HIERARCHY.get(required_role, 0)
