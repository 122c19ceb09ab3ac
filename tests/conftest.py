"""Shared pytest fixtures."""

from collections.abc import Iterator
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from blogdesk.app import App
from blogdesk.config import Config
from blogdesk.core.core import Core
from blogdesk.web.server import create_fastapi_app

PASSWORD = "secret"


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    for key, expected in query.items():
        value = doc.get(key)
        if isinstance(expected, dict) and "$gt" in expected:
            if value is None or not value > expected["$gt"]:
                return False
        elif value != expected:
            return False
    return True


class FakeCursor:
    """Subset of AsyncCursor: sort() and async iteration."""

    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs

    def sort(self, keys: list[tuple[str, int]]) -> "FakeCursor":
        for field, direction in reversed(keys):
            self._docs.sort(key=lambda doc, field=field: doc[field], reverse=direction < 0)
        return self

    def __aiter__(self) -> "FakeCursor":
        self._iter = iter(self._docs)
        return self

    async def __anext__(self) -> dict[str, Any]:
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration from None


class FakeCollection:
    """In-memory stand-in for the AsyncCollection calls the services make."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.docs: dict[Any, dict[str, Any]] = {}
        self.indexes: list[tuple[Any, dict[str, Any]]] = []

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return "index"

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        self.docs[doc["_id"]] = dict(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one(self, query: dict[str, Any], projection: dict[str, int] | None = None) -> dict[str, Any] | None:
        for doc in self.docs.values():
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query: dict[str, Any]) -> FakeCursor:
        return FakeCursor([dict(doc) for doc in self.docs.values() if _matches(doc, query)])

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> SimpleNamespace:
        for doc in self.docs.values():
            if _matches(doc, query):
                doc.update(update["$set"])
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        for key, doc in list(self.docs.items()):
            if _matches(doc, query):
                del self.docs[key]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def find_one_and_update(self, query: dict[str, Any], update: dict[str, Any], **_: Any) -> dict[str, Any]:
        doc = self.docs.setdefault(query["_id"], {"_id": query["_id"]})
        for field, amount in update["$inc"].items():
            doc[field] = doc.get(field, 0) + amount
        return dict(doc)


class FailingCollection(FakeCollection):
    """Collection whose server is unreachable."""

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        raise ServerSelectionTimeoutError("No servers available")

    async def find_one(self, query: dict[str, Any], projection: dict[str, int] | None = None) -> dict[str, Any] | None:
        raise ServerSelectionTimeoutError("No servers available")

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        raise ServerSelectionTimeoutError("No servers available")


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(name))


@pytest.fixture
def config() -> Config:
    """Config with no database and no upload credentials."""
    return Config(host="127.0.0.1", port=8000, debug=False, access_password=PASSWORD, _env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def upload_config() -> Config:
    return Config(
        host="127.0.0.1",
        port=8000,
        debug=False,
        access_password=PASSWORD,
        github_token="ghp_test",
        github_repo="octo/blog",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def core(config) -> Core:
    return Core(config)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def app(config) -> App:
    return App(config)


@pytest.fixture
def client(app, config) -> Iterator[TestClient]:
    with TestClient(create_fastapi_app(app, config), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def session_id(client) -> str:
    """A live session obtained through the login endpoint."""
    response = client.post("/api/auth/login", json={"password": PASSWORD})
    return response.json()["sessionId"]


@pytest.fixture
def failing_collection() -> FailingCollection:
    return FailingCollection("sessions")
