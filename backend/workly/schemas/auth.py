from pydantic import BaseModel
from typing import Any, Optional

class SessionPayload(BaseModel):
    """세션 토큰에 담을 사용자 정보 (email 외 필드도 그대로 클레임에 포함)"""
    email: Optional[Any] = None

    class Config:
        extra = "allow"

class SessionResponse(BaseModel):
    success: bool
