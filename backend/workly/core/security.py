from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import jwt, JWTError, ExpiredSignatureError
from fastapi import Request
from workly.config import settings
from workly.utils.exceptions import MissingCredentialException, InvalidCredentialException
from workly.utils.logger import auth_logger


@dataclass
class VerifiedIdentity:
    """인증 게이트를 통과한 요청자의 신원 (검증 방식과 무관한 공통 형태)"""
    email: Optional[str]
    claims: Dict[str, Any] = field(default_factory=dict)
    scheme: str = ""


class CredentialVerifier:
    """자격 증명 검증기 공통 인터페이스

    - `extract`: 요청에서 자격 증명 문자열을 꺼낸다. 없으면 None.
    - `verify`: 자격 증명을 검증해 VerifiedIdentity를 반환한다.
      실패 시 MissingCredentialException(401) 또는 InvalidCredentialException(403).
    """
    scheme: str = ""

    def extract(self, request: Request) -> Optional[str]:
        raise NotImplementedError

    async def verify(self, token: Optional[str]) -> VerifiedIdentity:
        raise NotImplementedError


class SessionTokenCodec(CredentialVerifier):
    """자체 발급 세션 토큰(JWT) 발급/검증, 쿠키로 전달된다"""
    scheme = "session"

    def __init__(
        self,
        secret: str = settings.JWT_ACCESS_SECRET,
        algorithm: str = settings.ALGORITHM,
        expires_delta: timedelta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
        cookie_name: str = settings.TOKEN_COOKIE_NAME,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self.cookie_name = cookie_name

    # 세션 토큰 발급 (페이로드는 검증 없이 그대로 클레임에 포함)
    def issue(self, payload: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        to_encode = dict(payload)
        now = datetime.now(timezone.utc)
        to_encode.update({
            "iat": int(now.timestamp()),
            "exp": int((now + (expires_delta or self.expires_delta)).timestamp()),
        })
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def decode(self, token: Optional[str]) -> Dict[str, Any]:
        if not token:
            raise MissingCredentialException()
        try:
            # 임의 페이로드를 허용하므로 aud 검증은 하지 않음
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_aud": False},
            )
        except ExpiredSignatureError:
            auth_logger.warning("만료된 세션 토큰")
            raise InvalidCredentialException()
        except JWTError as e:
            auth_logger.warning(f"세션 토큰 검증 실패: {str(e)}")
            raise InvalidCredentialException()

    def extract(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.cookie_name) or None

    async def verify(self, token: Optional[str]) -> VerifiedIdentity:
        claims = self.decode(token)
        return VerifiedIdentity(email=claims.get("email"), claims=claims, scheme=self.scheme)
