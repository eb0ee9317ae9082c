from pydantic import BaseModel
from typing import Optional

# 드라이버 결과 형태를 그대로 응답
class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: str

class UpdateResult(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None
