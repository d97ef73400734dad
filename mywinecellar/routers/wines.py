"""Wine write endpoints (create, edit, image) and wine read-back."""

from typing import Annotated

from fastapi import APIRouter, Body, File, Path, Query, Request, Response, UploadFile

from mywinecellar.config import settings
from mywinecellar.exceptions import NotFoundError
from mywinecellar.schemas import CellarEnvelope, ErrorResponse, WineRequest
from mywinecellar.services.envelope import build_envelope
from mywinecellar.services.images import media_type_for

from ._common import WineServiceDep, limiter

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}

WineId = Annotated[int, Path(ge=1, description="Wine id")]


async def create_wine(
    service: WineServiceDep,
    producer_id: Annotated[int, Query(alias="producerId", ge=1)],
    wine_request: Annotated[WineRequest | None, Body()] = None,
    shape_id: Annotated[int | None, Query(alias="shapeId", ge=1)] = None,
    color_id: Annotated[int | None, Query(alias="colorId", ge=1)] = None,
    type_id: Annotated[int | None, Query(alias="typeId", ge=1)] = None,
    closure_id: Annotated[int | None, Query(alias="closureId", ge=1)] = None,
) -> CellarEnvelope:
    """Add a new wine for a producer.

    ``name`` and ``size`` are required in the body. Shape, color, type and
    closure default to the configured default id.
    """
    wine = await service.create(
        wine_request,
        producer_id,
        shape_id=shape_id,
        color_id=color_id,
        type_id=type_id,
        closure_id=closure_id,
    )
    return build_envelope(wine)


async def edit_wine(
    service: WineServiceDep,
    wine_id: WineId,
    wine_request: Annotated[WineRequest | None, Body()] = None,
) -> CellarEnvelope:
    """Edit a wine. Only the non-null fields of the body are applied."""
    wine = await service.edit(wine_id, wine_request)
    return build_envelope(wine)


@limiter.limit(lambda: f"{settings.image_rate_limit_per_minute}/minute")
async def put_wine_image(
    request: Request,
    service: WineServiceDep,
    wine_id: WineId,
    file: Annotated[UploadFile | None, File(description="Wine image (jpg, png, ...)")] = None,
) -> CellarEnvelope:
    """Replace the image of a wine."""
    content = await file.read() if file is not None else None
    wine = await service.attach_image(wine_id, content)
    return build_envelope(wine)


async def get_wine(service: WineServiceDep, wine_id: WineId) -> CellarEnvelope:
    """Get a wine."""
    wine = await service.get_wine(wine_id)
    return build_envelope(wine)


async def get_wine_image(service: WineServiceDep, wine_id: WineId) -> Response:
    """Get the raw image of a wine."""
    wine = await service.get_wine(wine_id)
    if wine.image is None:
        raise NotFoundError("image for wine", wine_id)
    return Response(content=wine.image, media_type=media_type_for(wine.image))


router = APIRouter()

router.add_api_route(
    "/new",
    create_wine,
    methods=["POST"],
    status_code=201,
    responses=ERROR_RESPONSES,
)
router.add_api_route(
    "/{wine_id}/edit",
    edit_wine,
    methods=["PUT"],
    status_code=202,
    responses=ERROR_RESPONSES,
)
router.add_api_route(
    "/{wine_id}/image",
    put_wine_image,
    methods=["PUT"],
    status_code=202,
    responses=ERROR_RESPONSES,
)
router.add_api_route("/{wine_id}/image", get_wine_image, methods=["GET"])
router.add_api_route("/{wine_id}", get_wine, methods=["GET"], responses=ERROR_RESPONSES)
