"""Session storage backends.

Two interchangeable implementations: a MongoDB collection that survives restarts,
and a process-local dict used when no database is configured. The dict backend is
not shared between worker processes and is lost on restart.
"""

from abc import ABC, abstractmethod
from typing import Any

import structlog
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from blogdesk.core.modules.session.models import Session, SessionId

logger = structlog.get_logger(__name__)

# Stale session documents are purged by MongoDB one day after creation
SESSION_TTL_SECONDS = 24 * 60 * 60


class SessionStore(ABC):
    """Mapping from session id to expiry time."""

    async def create_schema(self) -> None:
        """Provision backing storage. Safe to call repeatedly and concurrently."""

    @abstractmethod
    async def put(self, session_id: SessionId, expires_at: int) -> None:
        """Insert a new session record."""

    @abstractmethod
    async def get(self, session_id: SessionId, now: int) -> bool:
        """Return True if a live (unexpired) record exists for session_id."""

    @abstractmethod
    async def delete(self, session_id: SessionId) -> None:
        """Remove a session record. Deleting an unknown id is not an error."""


class EphemeralSessionStore(SessionStore):
    """In-memory store scoped to the running process."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, int] = {}

    async def put(self, session_id: SessionId, expires_at: int) -> None:
        self._sessions[session_id] = expires_at

    async def get(self, session_id: SessionId, now: int) -> bool:
        """Look up the expiry, then purge the record if it has passed.

        This is not a pure query: an expired record is deleted as a side effect.
        """
        expires_at = self._sessions.get(session_id)
        if expires_at is None:
            return False
        if expires_at <= now:
            self._sessions.pop(session_id, None)
            return False
        return True

    async def delete(self, session_id: SessionId) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


class DurableSessionStore(SessionStore):
    """MongoDB-backed store, shared by every process pointing at the same database."""

    def __init__(self, collection: AsyncCollection[dict[str, Any]]) -> None:
        self._collection = collection
        self._schema_ready = False

    async def create_schema(self) -> None:
        # create_index is idempotent, so concurrent first callers race harmlessly
        if self._schema_ready:
            return
        await self._collection.create_index([("expires_at", 1)])
        await self._collection.create_index([("created_at", 1)], expireAfterSeconds=SESSION_TTL_SECONDS)
        self._schema_ready = True
        logger.debug("session_schema_ready", collection=self._collection.name)

    async def put(self, session_id: SessionId, expires_at: int) -> None:
        await self.create_schema()
        session = Session(id=session_id, expires_at=expires_at)
        await self._collection.insert_one(session.to_mongo())

    async def get(self, session_id: SessionId, now: int) -> bool:
        await self.create_schema()
        doc = await self._collection.find_one({"_id": session_id, "expires_at": {"$gt": now}}, projection={"_id": 1})
        return doc is not None

    async def delete(self, session_id: SessionId) -> None:
        await self.create_schema()
        await self._collection.delete_one({"_id": session_id})


def create_session_store(database: AsyncDatabase[dict[str, Any]] | None) -> SessionStore:
    """Select the session backend once, based on whether a database is configured."""
    if database is None:
        return EphemeralSessionStore()
    return DurableSessionStore(database.get_collection("sessions"))
