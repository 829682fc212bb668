"""Shared schema base and response envelopes"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Envelope(APIModel):
    """Base success envelope"""
    success: bool = True


class ErrorResponse(APIModel):
    """Error envelope"""
    success: bool = False
    message: str
    errors: Optional[List[Dict[str, Any]]] = None
