"""Business logic services for MyWineCellar."""

from mywinecellar.services.envelope import build_envelope
from mywinecellar.services.store import BeanieCellarStore, CellarStore
from mywinecellar.services.taxonomy import TaxonomyLookup
from mywinecellar.services.wine_merger import merge
from mywinecellar.services.wine_service import WineService

__all__ = [
    "BeanieCellarStore",
    "CellarStore",
    "TaxonomyLookup",
    "WineService",
    "build_envelope",
    "merge",
]
