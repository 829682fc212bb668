"""Authentication schemas"""

from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, EmailStr, Field

from tavola.models.user import UserRole
from tavola.schemas.common import APIModel, Envelope


class Token(BaseModel):
    """JWT token response (OAuth2 field names)"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserCreate(APIModel):
    """Registration request"""
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=8, max_length=72)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)
    preferences: Optional[Dict[str, Any]] = None


class UserResponse(APIModel):
    """User response"""
    id: int
    email: str
    username: str
    first_name: Optional[str]
    last_name: Optional[str]
    phone_number: Optional[str]
    role: UserRole
    is_verified: bool
    preferences: Optional[Dict[str, Any]]
    last_login: Optional[datetime]
    created_at: datetime


class UserEnvelope(Envelope):
    user: UserResponse
