from typing import Any, Dict, List
from workly.database.mongo import MongoStorage
from workly.utils.documents import to_object_id, serialize_document


def build_applicant_filter(email: str) -> Dict[str, Any]:
    return {"applicant": email}


def build_job_applications_filter(job_id: str) -> Dict[str, Any]:
    # jobId는 공고 _id의 문자열 값으로 저장됨 (참조 무결성 없음)
    return {"jobId": job_id}


async def list_applications_by_applicant(storage: MongoStorage, email: str) -> List[Dict[str, Any]]:
    applications = await storage.applications.find(build_applicant_filter(email)).to_list(length=None)
    return [serialize_document(a) for a in applications]


async def list_applications_by_job(storage: MongoStorage, job_id: str) -> List[Dict[str, Any]]:
    applications = await storage.applications.find(build_job_applications_filter(job_id)).to_list(length=None)
    return [serialize_document(a) for a in applications]


async def create_application(storage: MongoStorage, document: Dict[str, Any]) -> Dict[str, Any]:
    result = await storage.applications.insert_one(document)
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


async def update_application_status(storage: MongoStorage, application_id: str, status: Any) -> Dict[str, Any]:
    """지원서 상태(status) 필드만 부분 갱신

    상태 값 검증이나 요청자 권한 확인은 하지 않는다.
    """
    result = await storage.applications.update_one(
        {"_id": to_object_id(application_id)},
        {"$set": {"status": status}},
    )
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if result.upserted_id is not None else 0,
        "upsertedId": str(result.upserted_id) if result.upserted_id is not None else None,
    }
