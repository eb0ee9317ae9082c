import os
from typing import List
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


def _default_mongo_uri() -> str:
    # MONGO_URI가 없으면 Atlas 계정 정보로 URI 구성
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASSWORD")
    host = os.getenv("MONGO_HOST", "cluster0.dudbtcu.mongodb.net")
    if user and password:
        return f"mongodb+srv://{user}:{password}@{host}/?appName=Cluster0"
    return "mongodb://localhost:27017"


class Settings(BaseSettings):
    # MongoDB 설정
    MONGO_URI: str = os.getenv("MONGO_URI", _default_mongo_uri())
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "worklyDB")

    # 세션 토큰(JWT) 설정
    JWT_ACCESS_SECRET: str = os.getenv("JWT_ACCESS_SECRET", "SUPERSECRETKEY")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "1"))
    TOKEN_COOKIE_NAME: str = os.getenv("TOKEN_COOKIE_NAME", "token")
    # https 배포 시 true로 설정
    TOKEN_COOKIE_SECURE: bool = os.getenv("TOKEN_COOKIE_SECURE", "false").lower() == "true"

    # Firebase 서비스 계정 키
    FIREBASE_CREDENTIALS_PATH: str = os.getenv("FIREBASE_CREDENTIALS_PATH", "firebase-admin-key.json")

    # 인증 게이트에서 시도할 검증기 순서 (쉼표 구분: firebase, session)
    AUTH_SCHEMES: str = os.getenv("AUTH_SCHEMES", "firebase")

    # CORS 설정 (쉼표 구분)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def auth_schemes(self) -> List[str]:
        return [s.strip() for s in self.AUTH_SCHEMES.split(",") if s.strip()]

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
