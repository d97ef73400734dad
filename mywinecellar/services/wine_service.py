"""Wine write service: create, edit and image attach."""

import logging
from datetime import datetime, timezone

from mywinecellar.config import settings
from mywinecellar.entities import Wine
from mywinecellar.exceptions import BadRequestError, NotFoundError
from mywinecellar.schemas.wine import WineRequest
from mywinecellar.services.store import CellarStore
from mywinecellar.services.taxonomy import TaxonomyLookup
from mywinecellar.services.wine_merger import merge

logger = logging.getLogger(__name__)


class WineService:
    """Orchestrates the wine write path over a CellarStore.

    Every lookup and validation happens before the single store write of
    each operation, so a failed request leaves the store untouched.
    """

    def __init__(
        self,
        store: CellarStore,
        default_taxonomy_id: int | None = None,
        max_image_bytes: int | None = None,
    ) -> None:
        """Initialize the wine service.

        Args:
            store: Persistence for wines, producers and reference data.
            default_taxonomy_id: Shape/color/type/closure id used when a
                create request names none. Defaults to config setting.
            max_image_bytes: Image size ceiling; payloads of this size or
                larger are rejected. Defaults to config setting.
        """
        self.store = store
        self.taxonomy = TaxonomyLookup(store)
        self.default_taxonomy_id = (
            default_taxonomy_id if default_taxonomy_id is not None else settings.default_taxonomy_id
        )
        self.max_image_bytes = (
            max_image_bytes if max_image_bytes is not None else settings.max_image_bytes
        )

    async def create(
        self,
        update: WineRequest | None,
        producer_id: int,
        shape_id: int | None = None,
        color_id: int | None = None,
        type_id: int | None = None,
        closure_id: int | None = None,
    ) -> Wine:
        """Create a wine for a producer.

        Taxonomy ids left as None fall back to the default id.

        Raises:
            BadRequestError: If no payload was supplied or name/size is missing.
            NotFoundError: If the producer or any taxonomy id does not resolve.
        """
        if update is None:
            raise BadRequestError("wine request was null")

        wine = merge(None, update)

        producer = await self.taxonomy.producer(producer_id)

        default_id = self.default_taxonomy_id
        shape = await self.taxonomy.shape(shape_id if shape_id is not None else default_id)
        color = await self.taxonomy.color(color_id if color_id is not None else default_id)
        wine_type = await self.taxonomy.wine_type(type_id if type_id is not None else default_id)
        closure = await self.taxonomy.closure(closure_id if closure_id is not None else default_id)

        wine = wine.model_copy(
            update={
                "producer_id": producer.id,
                "shape_id": shape.id,
                "color_id": color.id,
                "type_id": wine_type.id,
                "closure_id": closure.id,
            }
        )

        saved = await self.store.insert_wine(wine)
        logger.info(
            "Created wine %d (%s) for producer %d", saved.id, saved.name, producer.id
        )
        return saved

    async def edit(self, wine_id: int, update: WineRequest | None) -> Wine:
        """Apply a sparse update to an existing wine.

        Associations are never changed by an edit.

        Raises:
            BadRequestError: If no payload was supplied.
            NotFoundError: If the wine does not exist.
        """
        if update is None:
            raise BadRequestError(f"wine request for id {wine_id} was null")

        existing = await self.get_wine(wine_id)
        wine = merge(existing, update)

        saved = await self.store.update_wine(wine)
        logger.info("Edited wine %d: %s", wine_id, sorted(update.provided_fields()))
        return saved

    async def attach_image(self, wine_id: int, file_bytes: bytes | None) -> Wine:
        """Replace a wine's image with the given bytes.

        Raises:
            BadRequestError: If no file was supplied or it is too large.
            NotFoundError: If the wine does not exist.
        """
        if file_bytes is None:
            raise BadRequestError("image file was not included on the request")

        existing = await self.get_wine(wine_id)

        if len(file_bytes) >= self.max_image_bytes:
            logger.debug(
                "image for wine %d is %d bytes, limit is below %d",
                wine_id,
                len(file_bytes),
                self.max_image_bytes,
            )
            max_mb = self.max_image_bytes // (1024 * 1024)
            raise BadRequestError(f"image cannot exceed {max_mb}MB")

        wine = existing.model_copy(
            update={"image": file_bytes, "updated_at": datetime.now(timezone.utc)}
        )
        saved = await self.store.update_wine(wine)
        logger.info("Attached %d byte image to wine %d", len(file_bytes), wine_id)
        return saved

    async def get_wine(self, wine_id: int) -> Wine:
        """Get a wine by id.

        Raises:
            NotFoundError: If the wine does not exist.
        """
        wine = await self.store.get_wine(wine_id)
        if wine is None:
            raise NotFoundError("wine", wine_id)
        return wine

    async def producer_wines(self, producer_id: int) -> list[Wine]:
        """List a producer's wines, as recorded in the store.

        Raises:
            NotFoundError: If the producer does not exist.
        """
        producer = await self.taxonomy.producer(producer_id)
        return await self.store.wines_for_producer(producer.id)
