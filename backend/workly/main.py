from contextlib import asynccontextmanager
from typing import List, Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from workly.config import settings
from workly.core.firebase import FirebaseTokenVerifier
from workly.core.security import CredentialVerifier, SessionTokenCodec
from workly.database.mongo import MongoStorage
from workly.routers import auth, jobs, applications
from workly.utils.exceptions import AppException, InternalServerException, create_error_response
from workly.utils.logger import app_logger, db_logger


def build_verifiers(schemes: List[str], session_codec: SessionTokenCodec) -> List[CredentialVerifier]:
    """설정된 이름 순서대로 인증 게이트 검증기 목록 구성"""
    available = {
        FirebaseTokenVerifier.scheme: lambda: FirebaseTokenVerifier(),
        SessionTokenCodec.scheme: lambda: session_codec,
    }
    verifiers = []
    for scheme in schemes:
        if scheme not in available:
            raise ValueError(f"알 수 없는 인증 방식: {scheme}")
        verifiers.append(available[scheme]())
    return verifiers


def create_app(
    storage: Optional[MongoStorage] = None,
    verifiers: Optional[List[CredentialVerifier]] = None,
    session_codec: Optional[SessionTokenCodec] = None,
) -> FastAPI:
    session_codec = session_codec or SessionTokenCodec()
    verifiers = verifiers if verifiers is not None else build_verifiers(settings.auth_schemes, session_codec)

    # 앱 시작 시 MongoDB 연결 확인, 종료 시 연결 정리
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_storage = storage is None
        app.state.storage = storage or MongoStorage.from_settings()
        await app.state.storage.ping()
        yield
        if owns_storage:
            app.state.storage.close()

    app = FastAPI(
        title="Workly Job Board API",
        lifespan=lifespan
    )
    app.state.session_codec = session_codec
    app.state.verifiers = verifiers

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,  # 쿠키 전송 허용
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        app_logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    # 에러 응답은 모두 {message} 형태
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=create_error_response(exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(PyMongoError)
    async def database_exception_handler(request: Request, exc: PyMongoError):
        db_logger.error(f"DB 오류 ({request.method} {request.url.path}): {str(exc)}")
        error = InternalServerException()
        return JSONResponse(status_code=error.status_code, content=create_error_response(error.detail))

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """서버 상태 확인"""
        return "Server is running..."

    # 라우터 등록
    app.include_router(auth.router)
    app.include_router(jobs.router)
    app.include_router(applications.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    app_logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(
        "workly.main:app",
        host="0.0.0.0",
        port=settings.PORT,
    )
