"""Resolution of producer and taxonomy identifiers."""

from mywinecellar.entities import Closure, Color, Producer, Shape, WineType
from mywinecellar.exceptions import NotFoundError
from mywinecellar.services.store import CellarStore, R


class TaxonomyLookup:
    """Resolves ids to entities, raising NotFoundError when one is missing."""

    def __init__(self, store: CellarStore) -> None:
        self.store = store

    async def producer(self, producer_id: int) -> Producer:
        producer = await self.store.get_producer(producer_id)
        if producer is None:
            raise NotFoundError("producer", producer_id)
        return producer

    async def _reference(self, kind: type[R], label: str, ref_id: int) -> R:
        entity = await self.store.get_reference(kind, ref_id)
        if entity is None:
            raise NotFoundError(label, ref_id)
        return entity

    async def shape(self, shape_id: int) -> Shape:
        return await self._reference(Shape, "shape", shape_id)

    async def color(self, color_id: int) -> Color:
        return await self._reference(Color, "color", color_id)

    async def wine_type(self, type_id: int) -> WineType:
        return await self._reference(WineType, "type", type_id)

    async def closure(self, closure_id: int) -> Closure:
        return await self._reference(Closure, "closure", closure_id)
