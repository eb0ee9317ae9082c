from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

import pytest
from bson import ObjectId
from fastapi import Request
from fastapi.testclient import TestClient
from workly.core.security import CredentialVerifier, SessionTokenCodec, VerifiedIdentity
from workly.database.mongo import MongoStorage
from workly.main import create_app
from workly.utils.exceptions import InvalidCredentialException, MissingCredentialException

SECRET = "test-secret"


@dataclass
class InsertOneResult:
    inserted_id: ObjectId
    acknowledged: bool = True


@dataclass
class UpdateResult:
    matched_count: int
    modified_count: int
    upserted_id: ObjectId | None = None
    acknowledged: bool = True


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class InMemoryCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self._docs if length is None else self._docs[:length]


class InMemoryCollection:
    """Equality-filter subset of the motor collection API."""

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.count_calls: list[dict[str, Any]] = []

    def find(self, query: dict[str, Any] | None = None) -> InMemoryCursor:
        query = query or {}
        return InMemoryCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query)])

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document: dict[str, Any]) -> InsertOneResult:
        document.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(document))
        return InsertOneResult(inserted_id=document["_id"])

    async def count_documents(self, query: dict[str, Any]) -> int:
        self.count_calls.append(query)
        return sum(1 for d in self.docs if _matches(d, query))

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> UpdateResult:
        for doc in self.docs:
            if _matches(doc, query):
                changes = update.get("$set", {})
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(changes)
                return UpdateResult(matched_count=1, modified_count=int(modified))
        return UpdateResult(matched_count=0, modified_count=0)


class InMemoryDatabase:
    def __init__(self) -> None:
        self._collections: dict[str, InMemoryCollection] = {}
        self.commands: list[str] = []

    def __getitem__(self, name: str) -> InMemoryCollection:
        return self._collections.setdefault(name, InMemoryCollection())

    async def command(self, name: str) -> dict[str, Any]:
        self.commands.append(name)
        return {"ok": 1.0}


class StaticBearerVerifier(CredentialVerifier):
    """Stands in for the Firebase verifier: maps bearer tokens to emails."""

    scheme = "firebase"

    def __init__(self, tokens: dict[str, str]) -> None:
        self.tokens = tokens

    def extract(self, request: Request) -> str | None:
        header = request.headers.get("authorization")
        if not header or not header.startswith("Bearer "):
            return None
        return header.split(" ")[1] or None

    async def verify(self, token: str | None) -> VerifiedIdentity:
        if not token:
            raise MissingCredentialException()
        if token not in self.tokens:
            raise InvalidCredentialException()
        email = self.tokens[token]
        return VerifiedIdentity(email=email, claims={"email": email}, scheme=self.scheme)


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def storage(database: InMemoryDatabase) -> MongoStorage:
    return MongoStorage(database)


@pytest.fixture
def session_codec() -> SessionTokenCodec:
    return SessionTokenCodec(secret=SECRET)


@pytest.fixture
def bearer_verifier() -> StaticBearerVerifier:
    return StaticBearerVerifier({"hr-token": "a@x.com", "seeker-token": "seeker@example.com"})


@pytest.fixture
def client(storage: MongoStorage, session_codec: SessionTokenCodec, bearer_verifier: StaticBearerVerifier):
    app = create_app(storage=storage, verifiers=[bearer_verifier, session_codec], session_codec=session_codec)
    with TestClient(app) as test_client:
        yield test_client
