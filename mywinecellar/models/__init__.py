"""MongoDB document models for MyWineCellar."""

from mywinecellar.models.counter import Counter
from mywinecellar.models.producer import ProducerDocument
from mywinecellar.models.taxonomy import (
    ClosureDocument,
    ColorDocument,
    ReferenceDocument,
    ShapeDocument,
    WineTypeDocument,
)
from mywinecellar.models.wine import WineDocument

__all__ = [
    # Main documents
    "WineDocument",
    "ProducerDocument",
    # Reference data documents
    "ReferenceDocument",
    "ShapeDocument",
    "ColorDocument",
    "WineTypeDocument",
    "ClosureDocument",
    # Id sequences
    "Counter",
]
