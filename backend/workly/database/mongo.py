from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi
from workly.config import settings
from workly.utils.logger import db_logger


class MongoStorage:
    """jobs / applications 컬렉션 접근 객체

    앱 시작 시 한 번 생성되어 app.state에 보관되고, 모든 핸들러가 공유한다
    (드라이버 커넥션 풀 재사용).
    """

    def __init__(self, database: AsyncIOMotorDatabase, client: Optional[AsyncIOMotorClient] = None):
        self.client = client
        self.database = database
        self.jobs = database["jobs"]
        self.applications = database["applications"]

    @classmethod
    def from_settings(cls, uri: str = settings.MONGO_URI, db_name: str = settings.MONGO_DB_NAME) -> "MongoStorage":
        # Stable API v1 (strict)
        client = AsyncIOMotorClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        return cls(client[db_name], client=client)

    async def ping(self):
        await self.database.command("ping")
        db_logger.info("Pinged your deployment. You successfully connected to MongoDB!")

    def close(self):
        """MongoDB 연결을 안전하게 종료합니다."""
        if self.client:
            self.client.close()
