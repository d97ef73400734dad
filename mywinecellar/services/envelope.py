"""Response envelope builder."""

from mywinecellar.entities import Wine
from mywinecellar.schemas.envelope import CellarEnvelope
from mywinecellar.schemas.wine import WineResponse


def build_envelope(*wines: Wine) -> CellarEnvelope:
    """Wrap one or more wines for transport."""
    return CellarEnvelope(wines=[WineResponse.model_validate(wine) for wine in wines])
