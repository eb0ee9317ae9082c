from fastapi import HTTPException, status
from typing import Any, Dict, Optional

class AppException(HTTPException):
    """애플리케이션 전용 예외 클래스"""
    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code

def create_error_response(message: str) -> Dict[str, Any]:
    """클라이언트가 기대하는 에러 응답 포맷 ({message})"""
    return {"message": message}

# 인증/인가 에러
class MissingCredentialException(AppException):
    """자격 증명이 아예 제출되지 않은 경우"""
    def __init__(self, message: str = "unauthorized access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            error_code="MISSING_CREDENTIAL"
        )

class InvalidCredentialException(AppException):
    """제출된 자격 증명이 거부된 경우 (서명 오류, 만료, 제공자 거부)"""
    def __init__(self, message: str = "forbidden access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=message,
            error_code="INVALID_CREDENTIAL"
        )

class OwnershipMismatchException(AppException):
    """쿼리의 email과 토큰의 email이 다른 경우"""
    def __init__(self, message: str = "forbidden access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=message,
            error_code="OWNERSHIP_MISMATCH"
        )

class IdentityProviderException(AppException):
    def __init__(self, message: str = "identity provider unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message,
            error_code="IDENTITY_PROVIDER_ERROR"
        )

# 요청 값 에러
class InvalidObjectIdException(AppException):
    def __init__(self, value: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid id: {value}",
            error_code="INVALID_ID"
        )

class InternalServerException(AppException):
    def __init__(self, message: str = "internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            error_code="INTERNAL_ERROR"
        )
