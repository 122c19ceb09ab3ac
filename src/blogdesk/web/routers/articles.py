from fastapi import APIRouter
from pydantic import BaseModel, Field

from blogdesk.core.modules.article.models import Article, ArticleDraft
from blogdesk.web.deps import AppDep, SessionIdDep
from blogdesk.web.openapi import ErrorResponse, SuccessResponse

router = APIRouter(tags=["articles"])


class ArticleCreatedResponse(BaseModel):
    success: bool = Field(True, description="Always true on success")
    id: int = Field(..., description="Generated article id")


@router.get(
    "/articles",
    summary="List articles",
    description="All articles, pinned first, then newest first.",
    operation_id="listArticles",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        501: {"model": ErrorResponse, "description": "Database not configured"},
    },
)
async def list_articles(app: AppDep, session_id: SessionIdDep) -> list[Article]:
    return await app.get_articles(session_id)


@router.post(
    "/articles",
    summary="Create article",
    description="Create an article. Missing fields fall back to defaults.",
    operation_id="createArticle",
    status_code=201,
    responses={
        201: {"description": "Article created"},
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        501: {"model": ErrorResponse, "description": "Database not configured"},
    },
)
async def create_article(draft: ArticleDraft, app: AppDep, session_id: SessionIdDep) -> ArticleCreatedResponse:
    article = await app.create_article(session_id, draft)
    return ArticleCreatedResponse(id=article.id)


@router.put(
    "/articles/{article_id:int}",
    summary="Update article",
    description="Replace all editable fields of an article.",
    operation_id="updateArticle",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Article not found"},
        501: {"model": ErrorResponse, "description": "Database not configured"},
    },
)
async def update_article(article_id: int, draft: ArticleDraft, app: AppDep, session_id: SessionIdDep) -> SuccessResponse:
    await app.update_article(session_id, article_id, draft)
    return SuccessResponse()


@router.delete(
    "/articles/{article_id:int}",
    summary="Delete article",
    operation_id="deleteArticle",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        501: {"model": ErrorResponse, "description": "Database not configured"},
    },
)
async def delete_article(article_id: int, app: AppDep, session_id: SessionIdDep) -> SuccessResponse:
    await app.delete_article(session_id, article_id)
    return SuccessResponse()
