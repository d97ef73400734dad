"""Taxonomy reference document models (shape, color, type, closure)."""

from typing import Optional

from beanie import Document


class ReferenceDocument(Document):
    """Common shape of the read-only reference collections."""

    id: int
    name: str
    description: Optional[str] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, name={self.name})>"


class ShapeDocument(ReferenceDocument):
    class Settings:
        name = "shapes"


class ColorDocument(ReferenceDocument):
    class Settings:
        name = "colors"


class WineTypeDocument(ReferenceDocument):
    class Settings:
        name = "wine_types"


class ClosureDocument(ReferenceDocument):
    class Settings:
        name = "closures"
