from typing import Optional
import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from workly.config import settings
from workly.core.security import CredentialVerifier, VerifiedIdentity
from workly.utils.exceptions import (
    MissingCredentialException,
    InvalidCredentialException,
    IdentityProviderException,
)
from workly.utils.logger import auth_logger


class FirebaseTokenVerifier(CredentialVerifier):
    """Firebase ID 토큰 검증기 (Authorization: Bearer <token>)"""
    scheme = "firebase"

    def __init__(self, credentials_path: str = settings.FIREBASE_CREDENTIALS_PATH, app: Optional[firebase_admin.App] = None):
        self.credentials_path = credentials_path
        self._app = app

    # 첫 검증 시점에 Firebase 앱 초기화 (서비스 계정 키가 없어도 서버는 기동됨)
    def get_app(self) -> firebase_admin.App:
        if self._app is None:
            try:
                self._app = firebase_admin.get_app()
            except ValueError:
                cred = credentials.Certificate(self.credentials_path)
                self._app = firebase_admin.initialize_app(cred)
        return self._app

    def extract(self, request: Request) -> Optional[str]:
        auth_header = request.headers.get("authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            return None
        token = auth_header.split(" ")[1]
        return token or None

    async def verify(self, token: Optional[str]) -> VerifiedIdentity:
        if not token:
            raise MissingCredentialException()
        try:
            app = self.get_app()
        except (OSError, ValueError) as e:
            auth_logger.error(f"Firebase 앱 초기화 실패: {str(e)}")
            raise IdentityProviderException()
        try:
            decoded = await run_in_threadpool(auth.verify_id_token, token, app=app)
        except (auth.InvalidIdTokenError, auth.UserDisabledError) as e:
            # 만료/폐기 토큰도 InvalidIdTokenError 하위 클래스
            auth_logger.warning(f"Firebase 토큰 거부: {str(e)}")
            raise InvalidCredentialException()
        except ValueError as e:
            # 빈 토큰은 위에서 걸러지므로 프로젝트 ID 누락 등 서버 설정 오류
            auth_logger.error(f"Firebase 설정 오류: {str(e)}")
            raise IdentityProviderException()
        except FirebaseError as e:
            auth_logger.error(f"Firebase 토큰 검증 중 오류: {str(e)}")
            raise IdentityProviderException()
        return VerifiedIdentity(email=decoded.get("email"), claims=decoded, scheme=self.scheme)
