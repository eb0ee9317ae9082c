from fastapi import Request
from workly.database.mongo import MongoStorage

# 앱 시작 시 생성된 저장소 객체를 제공하는 의존성 함수
def get_storage(request: Request) -> MongoStorage:
    return request.app.state.storage
