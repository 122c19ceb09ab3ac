from typing import Any

import structlog
from pymongo.asynchronous.collection import AsyncCollection

from blogdesk.core.core import Service
from blogdesk.core.modules.article.models import Article, ArticleDraft
from blogdesk.core.modules.counter.models import CounterType
from blogdesk.errors import NotFoundError
from blogdesk.utils import display_month, iso_now

logger = structlog.get_logger(__name__)

# Pinned articles first, then newest first
LIST_SORT = [("pinned", -1), ("created_at", -1), ("_id", -1)]


class ArticleService(Service):
    """CRUD over the articles collection. Every operation requires a configured database."""

    @property
    def _collection(self) -> AsyncCollection[dict[str, Any]]:
        return self.require_database().get_collection("articles")

    async def on_start(self) -> None:
        """Create the listing index when a database is configured."""
        if self.database is None:
            return
        try:
            await self._collection.create_index([("pinned", -1), ("created_at", -1)])
        except Exception:
            logger.exception("article_index_failed")

    async def list_articles(self) -> list[Article]:
        cursor = self._collection.find({}).sort(LIST_SORT)
        return await Article.list_cursor(cursor)

    async def create_article(self, draft: ArticleDraft) -> Article:
        """Insert a new article and return it with its generated id."""
        collection = self._collection
        article_id = await self.core.services.counter.get_next_sequence(CounterType.ARTICLE)
        timestamp = iso_now()
        article = Article(
            id=article_id,
            **draft.to_fields(),
            date=display_month(),
            created_at=timestamp,
            updated_at=timestamp,
        )
        await collection.insert_one(article.to_mongo())
        logger.info("article_created", article_id=article_id)
        return article

    async def update_article(self, article_id: int, draft: ArticleDraft) -> None:
        """Replace all editable fields of an article."""
        result = await self._collection.update_one(
            {"_id": article_id},
            {"$set": {**draft.to_fields(), "updated_at": iso_now()}},
        )
        if result.matched_count == 0:
            raise NotFoundError(f"Article {article_id} not found")
        logger.info("article_updated", article_id=article_id)

    async def delete_article(self, article_id: int) -> None:
        """Delete an article. Deleting a missing id is not an error."""
        result = await self._collection.delete_one({"_id": article_id})
        logger.info("article_deleted", article_id=article_id, deleted=result.deleted_count)
