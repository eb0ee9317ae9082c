from fastapi import APIRouter, Depends
from typing import Any, Dict, List

from workly.core.security import VerifiedIdentity
from workly.database import get_storage
from workly.database.mongo import MongoStorage
from workly.schemas.application import ApplicationCreate, ApplicationStatusUpdate
from workly.schemas.common import InsertResult, UpdateResult
from workly.services import application_service
from workly.utils.dependencies import verify_token_email
from workly.utils.logger import app_logger

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    operation_id="read_my_applications",
    summary="내 지원서 목록 조회",
    description="""
로그인한 지원자의 지원서 목록을 반환합니다.

- 인증 필요, `email` 쿼리 파라미터는 토큰의 이메일과 일치해야 합니다.
"""
)
async def read_my_applications(
    identity: VerifiedIdentity = Depends(verify_token_email),
    storage: MongoStorage = Depends(get_storage),
):
    return await application_service.list_applications_by_applicant(storage, identity.email)


# TODO: 공고 담당자만 조회할 수 있도록 인증 게이트 적용 여부 결정 필요
@router.get(
    "/job/{job_id}",
    response_model=List[Dict[str, Any]],
    operation_id="read_job_applications",
    summary="공고별 지원서 목록 조회",
    description="특정 공고(`jobId`)에 접수된 지원서 목록을 반환합니다. (인증 없음)"
)
async def read_job_applications(job_id: str, storage: MongoStorage = Depends(get_storage)):
    return await application_service.list_applications_by_job(storage, job_id)


@router.post(
    "",
    response_model=InsertResult,
    operation_id="create_application",
    summary="지원서 등록",
    description="요청 본문을 그대로 지원서 문서로 저장하고 생성된 ID를 반환합니다."
)
async def create_application(application: ApplicationCreate, storage: MongoStorage = Depends(get_storage)):
    result = await application_service.create_application(storage, application.model_dump(exclude_unset=True))
    app_logger.info(f"지원서 등록: {result['insertedId']} (jobId={application.jobId})")
    return result


@router.patch(
    "/{application_id}",
    response_model=UpdateResult,
    operation_id="update_application_status",
    summary="지원서 상태 변경",
    description="""
지원서의 `status` 필드만 변경합니다.

- 상태 값은 검증하지 않습니다.
- 다른 필드는 변경되지 않습니다.
"""
)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    storage: MongoStorage = Depends(get_storage),
):
    result = await application_service.update_application_status(storage, application_id, update.status)
    app_logger.info(f"지원서 상태 변경: {application_id} -> {update.status} (matched={result['matchedCount']})")
    return result
