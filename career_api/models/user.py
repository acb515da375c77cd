"""
User model module

@version 1.0.0
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class NicknameUpdate(BaseModel):
    """
    Nickname update request
    """
    nickname: str = Field(..., title="Nickname")


class NicknameUpdateResponse(BaseModel):
    message: str
    user: Dict[str, Any]
