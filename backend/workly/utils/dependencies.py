from fastapi import Depends, Request, Query
from typing import List, Optional
from workly.core.security import CredentialVerifier, VerifiedIdentity
from workly.utils.exceptions import MissingCredentialException, OwnershipMismatchException
from workly.utils.logger import auth_logger


def get_verifiers(request: Request) -> List[CredentialVerifier]:
    return request.app.state.verifiers


# 인증 게이트: 설정된 순서대로 자격 증명이 있는 첫 번째 검증기로 검증
async def require_identity(
    request: Request,
    verifiers: List[CredentialVerifier] = Depends(get_verifiers),
) -> VerifiedIdentity:
    for verifier in verifiers:
        token = verifier.extract(request)
        if token:
            return await verifier.verify(token)

    auth_logger.warning(f"자격 증명 없음: {request.method} {request.url.path}")
    raise MissingCredentialException()


# 소유자 게이트: 쿼리의 email과 토큰의 email이 일치해야 함
def verify_token_email(
    email: Optional[str] = Query(None, description="요청자 이메일 (토큰의 email과 일치해야 함)"),
    identity: VerifiedIdentity = Depends(require_identity),
) -> VerifiedIdentity:
    # email 없는 토큰 + email 없는 쿼리도 통과시키지 않음
    if not email or email != identity.email:
        auth_logger.warning(f"이메일 불일치: query={email}, token={identity.email}")
        raise OwnershipMismatchException()
    return identity
