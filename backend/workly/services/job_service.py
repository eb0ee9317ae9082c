from typing import Any, Dict, List, Optional
from workly.database.mongo import MongoStorage
from workly.services.application_service import build_job_applications_filter
from workly.utils.documents import to_object_id, serialize_document


def build_jobs_filter(email: Optional[str]) -> Dict[str, Any]:
    """email이 있으면 담당자(hr_email) 기준 필터, 없으면 전체"""
    query: Dict[str, Any] = {}
    if email:
        query["hr_email"] = email
    return query


async def list_jobs(storage: MongoStorage, email: Optional[str] = None) -> List[Dict[str, Any]]:
    jobs = await storage.jobs.find(build_jobs_filter(email)).to_list(length=None)
    return [serialize_document(job) for job in jobs]


async def list_jobs_with_application_counts(storage: MongoStorage, email: str) -> List[Dict[str, Any]]:
    """담당자의 공고 목록 + 공고별 지원서 수(applications_count)

    공고마다 count 쿼리를 한 번씩 실행한다 (N+1). 규모가 커지면 aggregate로 대체.
    """
    jobs = await storage.jobs.find({"hr_email": email}).to_list(length=None)

    for job in jobs:
        application_query = build_job_applications_filter(str(job["_id"]))
        job["applications_count"] = await storage.applications.count_documents(application_query)
    return [serialize_document(job) for job in jobs]


async def get_job(storage: MongoStorage, job_id: str) -> Optional[Dict[str, Any]]:
    # 없는 공고는 에러가 아니라 None
    job = await storage.jobs.find_one({"_id": to_object_id(job_id)})
    return serialize_document(job)


async def create_job(storage: MongoStorage, document: Dict[str, Any]) -> Dict[str, Any]:
    result = await storage.jobs.insert_one(document)
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}
