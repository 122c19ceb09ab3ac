"""Auto-incrementing counters for sequential numbering."""

from enum import StrEnum

from pydantic import Field

from blogdesk.core.db import MongoModel


class CounterType(StrEnum):
    """Types of entities that use sequential numbering."""

    ARTICLE = "article"


class Counter(MongoModel):
    """Atomic counter keyed by counter type.

    Uses MongoDB atomic operations to prevent duplicates.
    """

    id: CounterType = Field(alias="_id", serialization_alias="id")
    seq: int = 0  # Current value; next number will be seq + 1
