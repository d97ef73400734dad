"""Domain entities for the wine write path.

These are plain pydantic models. The Beanie documents in
``mywinecellar.models`` are their MongoDB mapping, and the store converts
between the two.
"""

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

NON_VINTAGE = "NV"

Vintage = Union[Annotated[int, Field(ge=1000, le=2200)], Literal["NV"]]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReferenceEntity(BaseModel):
    """Immutable reference data looked up by integer id."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: Optional[str] = None


class Shape(ReferenceEntity):
    """Bottle shape (bordeaux, burgundy, flute, ...)."""


class Color(ReferenceEntity):
    """Wine color (red, white, rosé, ...)."""


class WineType(ReferenceEntity):
    """Wine type (still, sparkling, fortified, ...)."""


class Closure(ReferenceEntity):
    """Bottle closure (natural cork, screw cap, ...)."""


class Producer(BaseModel):
    """Wine producer.

    The producer's wines are not held here; they are queried from the store
    by ``Wine.producer_id``.
    """

    id: int
    name: str
    description: Optional[str] = None
    weblink: Optional[str] = None


class Wine(BaseModel):
    """A wine in the catalog.

    ``id`` is assigned by the store on insert. The association ids are
    ``None`` only while a new wine is being wired by the write service.
    """

    id: Optional[int] = None

    name: str = Field(..., min_length=1)
    vintage: Optional[Vintage] = None
    size: float = Field(..., gt=0, description="Bottle volume in millilitres")

    alcohol: Optional[float] = Field(None, ge=0, le=100)
    acidity: Optional[float] = None
    ph: Optional[float] = None
    sugar: Optional[float] = None
    bottling: Optional[str] = None
    description: Optional[str] = None
    weblink: Optional[str] = None

    image: Optional[bytes] = Field(default=None, repr=False)

    producer_id: Optional[int] = None
    shape_id: Optional[int] = None
    color_id: Optional[int] = None
    type_id: Optional[int] = None
    closure_id: Optional[int] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
