from pydantic import BaseModel, Field
from typing import Any, Optional

class JobCreate(BaseModel):
    """채용공고 등록 스키마

    공고 필드는 클라이언트가 자유롭게 정의하며(스키마리스), 알려진 필드는 hr_email 뿐이다.
    """
    hr_email: Optional[Any] = Field(None, description="공고 등록 담당자 이메일")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "title": "Backend Developer",
                "company": "Workly",
                "location": "Remote",
                "hr_email": "hr@workly.io"
            }
        }
