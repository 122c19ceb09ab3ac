from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from blogdesk.core.db import MongoModel

DEFAULT_TITLE = "Untitled"
DEFAULT_CATEGORY = "work"
DEFAULT_TAG = "frontend"
DEFAULT_TAG_COLOR = "purple"
DEFAULT_STATUS = "draft"


class ArticleDraft(BaseModel):
    """Editable article fields as submitted by the client.

    Accepts both snake_case and camelCase for raw_content and tag_color;
    snake_case wins when both are present.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    excerpt: str | None = None
    raw_content: str | None = Field(default=None, validation_alias=AliasChoices("raw_content", "rawContent"))
    content: str | None = None
    category: str | None = None
    tag: str | None = None
    tag_color: str | None = Field(default=None, validation_alias=AliasChoices("tag_color", "tagColor"))
    status: str | None = None
    pinned: bool | None = None

    def to_fields(self) -> dict[str, Any]:
        """Stored field values with defaults applied to missing or empty input."""
        return {
            "title": self.title or DEFAULT_TITLE,
            "excerpt": self.excerpt or "",
            "raw_content": self.raw_content or "",
            "content": self.content or "",
            "category": self.category or DEFAULT_CATEGORY,
            "tag": self.tag or DEFAULT_TAG,
            "tag_color": self.tag_color or DEFAULT_TAG_COLOR,
            "status": self.status or DEFAULT_STATUS,
            "pinned": bool(self.pinned),
        }


class Article(MongoModel):
    """Blog article.

    Stored with a sequential integer `_id`; indexed on (pinned, created_at) for listing.
    """

    id: int = Field(alias="_id", serialization_alias="id")
    title: str
    excerpt: str
    raw_content: str
    content: str
    category: str
    tag: str
    tag_color: str
    date: str  # Display month fixed at creation, e.g. "October 2026"
    status: str
    pinned: bool
    created_at: str  # ISO-8601 UTC
    updated_at: str  # ISO-8601 UTC
