from collections.abc import Callable
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from blogdesk.core.core import Service
from blogdesk.core.modules.session.models import Session, SessionId
from blogdesk.core.modules.session.store import SessionStore, create_session_store
from blogdesk.errors import AuthenticationError, InvalidCredentialsError
from blogdesk.utils import generate_session_id, unix_now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Exchanges the shared password for sessions and validates or revokes them."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]] | None) -> None:
        super().__init__(database)
        self.store: SessionStore = create_session_store(database)
        self.clock: Callable[[], int] = unix_now

    async def on_start(self) -> None:
        """Create the session collection indexes on startup.

        An unreachable database must not stop the server. Every store call retries the
        schema, and session checks fail closed until it succeeds.
        """
        try:
            await self.store.create_schema()
        except Exception:
            logger.exception("session_schema_failed")

    async def login(self, password: str | None) -> Session:
        """Issue a new session if password equals the configured secret.

        Plain string equality, no hashing or constant-time comparison.
        """
        if not password or password != self.core.config.access_password:
            logger.info("login_rejected")
            raise InvalidCredentialsError

        session_id = SessionId(generate_session_id())
        expires_at = self.clock() + self.core.config.session_expire_minutes * 60
        await self.store.put(session_id, expires_at)
        logger.info("session_created", expires_at=expires_at)
        return Session(id=session_id, expires_at=expires_at)

    async def check(self, session_id: str | None) -> bool:
        """Return whether session_id is live. Any storage fault counts as invalid."""
        if not session_id:
            return False
        try:
            return await self.store.get(SessionId(session_id), self.clock())
        except Exception:
            logger.exception("session_check_failed")
            return False

    async def ensure_authenticated(self, session_id: str | None) -> SessionId:
        """Raise AuthenticationError unless session_id is live."""
        if not session_id or not await self.check(session_id):
            raise AuthenticationError
        return SessionId(session_id)

    async def logout(self, session_id: str | None) -> None:
        """Revoke a session. Unknown ids and storage faults are not errors."""
        if not session_id:
            return
        try:
            await self.store.delete(SessionId(session_id))
        except Exception:
            logger.exception("session_delete_failed")
            return
        logger.info("session_revoked")
