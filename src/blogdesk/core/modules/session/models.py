"""Session management models."""

from datetime import datetime
from typing import NewType

from pydantic import Field

from blogdesk.core.db import MongoModel
from blogdesk.utils import now

SessionId = NewType("SessionId", str)


class Session(MongoModel):
    """Authenticated session issued on login.

    Valid while present in the store and `expires_at` is in the future.
    Stored with the session id as `_id`; indexed on expires_at and created_at (TTL 1 day).
    """

    id: str = Field(alias="_id", serialization_alias="id")
    expires_at: int  # Unix seconds
    created_at: datetime = Field(default_factory=now)
