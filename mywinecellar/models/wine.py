"""Wine document model for MongoDB."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field

from mywinecellar.entities import Vintage


class WineDocument(Document):
    """Wine document mapping ``mywinecellar.entities.Wine`` to MongoDB."""

    # Integer id allocated from the "wines" counter
    id: int

    name: Indexed(str)
    vintage: Optional[Vintage] = None
    size: float

    alcohol: Optional[float] = None
    acidity: Optional[float] = None
    ph: Optional[float] = None
    sugar: Optional[float] = None
    bottling: Optional[str] = None
    description: Optional[str] = None
    weblink: Optional[str] = None

    # Raw image bytes, stored as BSON binary
    image: Optional[bytes] = None

    # Associations (foreign keys)
    producer_id: Indexed(int)
    shape_id: int
    color_id: int
    type_id: int
    closure_id: int

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "wines"
        indexes = [
            "name",
            "producer_id",
        ]

    def __repr__(self) -> str:
        return f"<WineDocument(id={self.id}, name={self.name}, vintage={self.vintage})>"
