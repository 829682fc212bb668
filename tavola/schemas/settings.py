"""Restaurant settings schemas"""

from datetime import datetime
from typing import List, Optional

from tavola.schemas.common import APIModel, Envelope


class SettingUpdate(APIModel):
    """Create or replace a setting value"""
    value: str
    description: Optional[str] = None


class SettingResponse(APIModel):
    id: int
    name: str
    value: str
    category: str
    description: Optional[str]
    updated_at: datetime


class SettingEnvelope(Envelope):
    setting: SettingResponse


class SettingListEnvelope(Envelope):
    category: str
    count: int
    settings: List[SettingResponse]
