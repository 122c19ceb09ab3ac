from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from blogdesk.config import Config
from blogdesk.core.core import Core
from blogdesk.core.modules.article.models import Article, ArticleDraft
from blogdesk.core.modules.session.models import Session
from blogdesk.errors import ValidationError


class App:
    """Facade for all application operations, validates the session before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    # === Session (public) ===
    async def login(self, password: str | None) -> Session:
        """Exchange the shared password for a new session."""
        return await self._core.services.session.login(password)

    async def is_session_valid(self, session_id: str | None) -> bool:
        """Check whether a session is live. Never raises."""
        return await self._core.services.session.check(session_id)

    async def logout(self, session_id: str | None) -> None:
        """Revoke a session if it exists."""
        await self._core.services.session.logout(session_id)

    # === Articles (session required) ===
    async def get_articles(self, session_id: str) -> list[Article]:
        """List articles, pinned first then newest first."""
        await self._core.services.session.ensure_authenticated(session_id)
        return await self._core.services.article.list_articles()

    async def create_article(self, session_id: str, draft: ArticleDraft) -> Article:
        await self._core.services.session.ensure_authenticated(session_id)
        return await self._core.services.article.create_article(draft)

    async def update_article(self, session_id: str, article_id: int, draft: ArticleDraft) -> None:
        await self._core.services.session.ensure_authenticated(session_id)
        await self._core.services.article.update_article(article_id, draft)

    async def delete_article(self, session_id: str, article_id: int) -> None:
        await self._core.services.session.ensure_authenticated(session_id)
        await self._core.services.article.delete_article(article_id)

    # === Uploads (session required) ===
    async def upload_file(self, session_id: str, filename: str | None, content: bytes | None, content_type: str) -> str:
        """Relay a file to the configured content store and return its public URL."""
        await self._core.services.session.ensure_authenticated(session_id)
        self._core.services.upload.ensure_configured()
        if content is None:
            raise ValidationError("No file")
        return await self._core.services.upload.store(filename, content, content_type)
