"""Transport envelope schemas."""

from pydantic import BaseModel, Field

from mywinecellar.schemas.wine import WineResponse


class CellarEnvelope(BaseModel):
    """Outer wrapper for every successful response."""

    wines: list[WineResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of every error response raised by the cellar core."""

    status: int
    detail: str
