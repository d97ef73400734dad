"""Pydantic schemas for wine requests and responses."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mywinecellar.entities import Vintage, Wine


class WineRequest(BaseModel):
    """Sparse wine payload used for both create and edit.

    A field that is absent or null leaves the current value unchanged on
    edit. On create, ``name`` and ``size`` must be supplied.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    vintage: Optional[Vintage] = Field(None, description="Year, or 'NV' for non-vintage")
    size: Optional[float] = Field(None, gt=0, description="Bottle volume in millilitres")
    alcohol: Optional[float] = Field(None, ge=0, le=100)
    acidity: Optional[float] = Field(None, ge=0)
    ph: Optional[float] = Field(None, ge=0, le=14)
    sugar: Optional[float] = Field(None, ge=0)
    bottling: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=5000)
    weblink: Optional[str] = Field(None, max_length=500)

    def provided_fields(self) -> dict[str, Any]:
        """Fields the caller explicitly set to a non-null value."""
        return {
            field: getattr(self, field)
            for field in self.model_fields_set
            if getattr(self, field) is not None
        }


class WineResponse(BaseModel):
    """Wine representation returned to callers.

    The image itself is not inlined; ``has_image`` and ``image_size``
    describe it.
    """

    id: int
    name: str
    vintage: Optional[Vintage] = None
    size: float
    alcohol: Optional[float] = None
    acidity: Optional[float] = None
    ph: Optional[float] = None
    sugar: Optional[float] = None
    bottling: Optional[str] = None
    description: Optional[str] = None
    weblink: Optional[str] = None

    producer_id: int
    shape_id: int
    color_id: int
    type_id: int
    closure_id: int

    has_image: bool = False
    image_size: int = 0

    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def describe_image(cls, data: Any) -> Any:
        """Replace raw image bytes with their presence and length."""
        if isinstance(data, Wine):
            data = data.model_dump()
        if isinstance(data, dict) and "image" in data:
            data = dict(data)
            image = data.pop("image")
            data["has_image"] = image is not None
            data["image_size"] = len(image) if image else 0
        return data
