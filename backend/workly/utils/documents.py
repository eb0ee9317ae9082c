from typing import Any, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from workly.utils.exceptions import InvalidObjectIdException


def to_object_id(value: str) -> ObjectId:
    """경로 파라미터 문자열을 ObjectId로 변환 (형식 오류 시 400)"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidObjectIdException(value)


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    # JSON 응답용: _id(ObjectId)를 24자리 hex 문자열로
    if doc is None:
        return None
    result = dict(doc)
    if isinstance(result.get("_id"), ObjectId):
        result["_id"] = str(result["_id"])
    return result
