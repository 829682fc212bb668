"""Dining area and table schemas"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import Field

from tavola.models.table import TableStatus
from tavola.schemas.common import APIModel, Envelope


class DiningAreaCreate(APIModel):
    """Create dining area request"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    is_active: bool = True
    capacity: int = Field(..., ge=1)
    floor_plan: Optional[Dict[str, Any]] = None


class DiningAreaResponse(APIModel):
    """Dining area response"""
    id: int
    name: str
    description: Optional[str]
    is_active: bool
    capacity: int
    floor_plan: Optional[Dict[str, Any]]
    created_at: datetime
    updated_at: datetime


class TableCreate(APIModel):
    """Create table request"""
    dining_area_id: int
    table_number: str = Field(..., min_length=1, max_length=20)
    capacity: int = Field(..., ge=1, le=32767)
    status: TableStatus = TableStatus.AVAILABLE
    is_active: bool = True
    position: Optional[Dict[str, Any]] = None
    shape: Optional[str] = Field("rectangle", max_length=20)
    size: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


class TableStatusUpdate(APIModel):
    status: TableStatus


class TableResponse(APIModel):
    """Table response"""
    id: int
    dining_area_id: int
    table_number: str
    capacity: int
    status: TableStatus
    is_active: bool
    position: Optional[Dict[str, Any]]
    shape: Optional[str]
    size: Optional[Dict[str, Any]]
    metadata: Optional[Dict[str, Any]] = Field(None, validation_alias="metadata_json")
    created_at: datetime
    updated_at: datetime


class TableEnvelope(Envelope):
    table: TableResponse


class TableListEnvelope(Envelope):
    count: int
    tables: List[TableResponse]


class DiningAreaEnvelope(Envelope):
    dining_area: DiningAreaResponse


class DiningAreaListEnvelope(Envelope):
    count: int
    dining_areas: List[DiningAreaResponse]
