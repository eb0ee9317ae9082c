from pydantic import BaseModel, Field
from typing import Any, Optional

class ApplicationCreate(BaseModel):
    """지원서 등록 스키마 (알려진 필드 외 추가 필드 허용)"""
    jobId: Optional[Any] = Field(None, description="지원한 공고의 _id (문자열)")
    applicant: Optional[Any] = Field(None, description="지원자 이메일")
    status: Optional[Any] = Field(None, description="지원 상태")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "jobId": "665f1c2e8b3e4a0012345678",
                "applicant": "seeker@example.com",
                "linkedIn": "https://linkedin.com/in/seeker",
                "resume": "https://example.com/resume.pdf"
            }
        }

# 상태 변경용 (status 필드만 갱신)
class ApplicationStatusUpdate(BaseModel):
    # 값 검증 없이 존재 여부만 확인
    status: Any
