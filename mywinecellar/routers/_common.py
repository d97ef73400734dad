"""Shared dependencies for the cellar routers."""

from typing import Annotated

from fastapi import Depends
from slowapi import Limiter
from slowapi.util import get_remote_address

from mywinecellar.services.store import BeanieCellarStore
from mywinecellar.services.wine_service import WineService

# Rate limiter for upload endpoints
limiter = Limiter(key_func=get_remote_address)


def get_wine_service() -> WineService:
    """Wine service over the MongoDB store."""
    return WineService(BeanieCellarStore())


WineServiceDep = Annotated[WineService, Depends(get_wine_service)]
