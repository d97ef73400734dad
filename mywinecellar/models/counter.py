"""Sequence counters for integer document ids."""

from beanie import Document
from pymongo import ReturnDocument


class Counter(Document):
    """One document per sequence; ``id`` is the sequence name."""

    id: str
    seq: int = 0

    class Settings:
        name = "counters"

    @classmethod
    async def next_value(cls, sequence: str) -> int:
        """Atomically increment and return the next value of a sequence."""
        collection = cls.get_pymongo_collection()
        doc = await collection.find_one_and_update(
            {"_id": sequence},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return doc["seq"]
