from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List, Optional

from workly.core.security import VerifiedIdentity
from workly.database import get_storage
from workly.database.mongo import MongoStorage
from workly.schemas.common import InsertResult
from workly.schemas.job import JobCreate
from workly.services import job_service
from workly.utils.dependencies import verify_token_email
from workly.utils.logger import app_logger

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    operation_id="read_jobs",
    summary="채용공고 목록 조회",
    description="""
채용공고 목록을 조회합니다.

- `email` 쿼리 파라미터가 있으면 해당 담당자(`hr_email`)의 공고만 반환합니다.
- 없으면 전체 공고를 반환합니다. (인증 없음)
"""
)
async def read_jobs(
    email: Optional[str] = Query(None, description="담당자 이메일로 필터링"),
    storage: MongoStorage = Depends(get_storage),
):
    jobs = await job_service.list_jobs(storage, email)
    app_logger.info(f"채용공고 조회 완료: {len(jobs)}건")
    return jobs


# /jobs/{job_id}보다 먼저 등록되어야 함
@router.get(
    "/applications",
    response_model=List[Dict[str, Any]],
    operation_id="read_my_jobs_with_application_counts",
    summary="내 채용공고 + 지원서 수 조회",
    description="""
로그인한 담당자가 등록한 공고 목록을 공고별 지원서 수(`applications_count`)와 함께 반환합니다.

- 인증 필요 (Firebase ID 토큰), `email`은 토큰의 이메일과 일치해야 합니다.
"""
)
async def read_my_jobs_with_application_counts(
    identity: VerifiedIdentity = Depends(verify_token_email),
    storage: MongoStorage = Depends(get_storage),
):
    return await job_service.list_jobs_with_application_counts(storage, identity.email)


@router.get(
    "/{job_id}",
    response_model=Optional[Dict[str, Any]],
    operation_id="read_job",
    summary="채용공고 상세 조회",
    description="공고 ID로 단건 조회합니다. 없으면 `null`을 반환합니다."
)
async def read_job(job_id: str, storage: MongoStorage = Depends(get_storage)):
    return await job_service.get_job(storage, job_id)


@router.post(
    "",
    response_model=InsertResult,
    operation_id="create_job",
    summary="채용공고 등록",
    description="요청 본문을 그대로 공고 문서로 저장하고 생성된 ID를 반환합니다."
)
async def create_job(job: JobCreate, storage: MongoStorage = Depends(get_storage)):
    result = await job_service.create_job(storage, job.model_dump(exclude_unset=True))
    app_logger.info(f"채용공고 등록: {result['insertedId']}")
    return result
