"""Producer endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path

from mywinecellar.schemas import CellarEnvelope
from mywinecellar.services.envelope import build_envelope

from ._common import WineServiceDep

router = APIRouter()


@router.get("/{producer_id}/wines")
async def list_producer_wines(
    service: WineServiceDep,
    producer_id: Annotated[int, Path(ge=1)],
) -> CellarEnvelope:
    """List the wines of a producer."""
    wines = await service.producer_wines(producer_id)
    return build_envelope(*wines)
