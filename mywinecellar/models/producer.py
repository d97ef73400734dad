"""Producer document model."""

from typing import Optional

from beanie import Document, Indexed


class ProducerDocument(Document):
    """Producer document. Its wines are found by ``WineDocument.producer_id``."""

    id: int
    name: Indexed(str)
    description: Optional[str] = None
    weblink: Optional[str] = None

    class Settings:
        name = "producers"

    def __repr__(self) -> str:
        return f"<ProducerDocument(id={self.id}, name={self.name})>"
