"""Pydantic schemas for API request/response validation."""

from mywinecellar.schemas.envelope import CellarEnvelope, ErrorResponse
from mywinecellar.schemas.wine import WineRequest, WineResponse

__all__ = [
    "CellarEnvelope",
    "ErrorResponse",
    "WineRequest",
    "WineResponse",
]
