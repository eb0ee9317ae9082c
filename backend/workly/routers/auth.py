from fastapi import APIRouter, Request, Response

from workly.config import settings
from workly.core.security import SessionTokenCodec
from workly.schemas.auth import SessionPayload, SessionResponse
from workly.utils.logger import auth_logger

router = APIRouter(tags=["auth"])


@router.post(
    "/jwt",
    response_model=SessionResponse,
    operation_id="issue_session_token",
    summary="세션 토큰 발급",
    description="""
요청 본문의 사용자 정보를 클레임으로 담은 세션 토큰(JWT, 1일 만료)을 발급합니다.

- 토큰은 응답 본문이 아니라 httpOnly 쿠키(`token`)로 설정됩니다.
- 이후 검증을 위해 본문에 `email`이 포함되어야 합니다.
"""
)
def issue_session_token(payload: SessionPayload, request: Request, response: Response) -> SessionResponse:
    codec: SessionTokenCodec = request.app.state.session_codec
    token = codec.issue(payload.model_dump(exclude_unset=True))

    # TODO: https 배포 전 TOKEN_COOKIE_SECURE=true 및 samesite 정책 검토
    response.set_cookie(
        key=codec.cookie_name,
        value=token,
        httponly=True,
        secure=settings.TOKEN_COOKIE_SECURE,
    )
    auth_logger.info(f"세션 토큰 발급: {payload.email}")
    return SessionResponse(success=True)
