from pymongo import ReturnDocument

from blogdesk.core.core import Service
from blogdesk.core.modules.counter.models import Counter, CounterType


class CounterService(Service):
    """Service for managing auto-incrementing counters."""

    async def get_next_sequence(self, counter_type: CounterType) -> int:
        """Atomically increment and return the next sequence number for a type."""
        collection = self.require_database().get_collection("counters")
        result = await collection.find_one_and_update(
            {"_id": counter_type},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

        # If it was just created (upserted), seq will be 1
        return Counter.model_validate(result).seq
