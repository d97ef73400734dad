"""Persistence for the wine write path.

``CellarStore`` is the keyed store the core depends on: find-by-id for
wines, producers and reference data, insert and update for wines, and the
producer-to-wines query. ``BeanieCellarStore`` implements it on MongoDB.
"""

import logging
from typing import Protocol, TypeVar

from mywinecellar.entities import (
    Closure,
    Color,
    Producer,
    ReferenceEntity,
    Shape,
    Wine,
    WineType,
)
from mywinecellar.models import (
    ClosureDocument,
    ColorDocument,
    Counter,
    ProducerDocument,
    ReferenceDocument,
    ShapeDocument,
    WineDocument,
    WineTypeDocument,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ReferenceEntity)

WINE_SEQUENCE = "wines"

REFERENCE_DOCUMENTS: dict[type[ReferenceEntity], type[ReferenceDocument]] = {
    Shape: ShapeDocument,
    Color: ColorDocument,
    WineType: WineTypeDocument,
    Closure: ClosureDocument,
}


class CellarStore(Protocol):
    """Keyed store used by the write service."""

    async def get_wine(self, wine_id: int) -> Wine | None: ...

    async def insert_wine(self, wine: Wine) -> Wine: ...

    async def update_wine(self, wine: Wine) -> Wine: ...

    async def wines_for_producer(self, producer_id: int) -> list[Wine]: ...

    async def get_producer(self, producer_id: int) -> Producer | None: ...

    async def get_reference(self, kind: type[R], ref_id: int) -> R | None: ...


class BeanieCellarStore:
    """CellarStore backed by Beanie documents.

    Requires ``mywinecellar.database.init_db`` to have run.
    """

    async def get_wine(self, wine_id: int) -> Wine | None:
        doc = await WineDocument.get(wine_id)
        if doc is None:
            return None
        return Wine.model_validate(doc.model_dump())

    async def insert_wine(self, wine: Wine) -> Wine:
        """Allocate an id and insert the wine in a single write."""
        wine_id = await Counter.next_value(WINE_SEQUENCE)
        stored = wine.model_copy(update={"id": wine_id})
        await WineDocument(**stored.model_dump()).insert()
        logger.debug("Inserted wine %d for producer %s", wine_id, stored.producer_id)
        return stored

    async def update_wine(self, wine: Wine) -> Wine:
        """Replace the stored wine. Raises DocumentNotFound if it is gone."""
        await WineDocument(**wine.model_dump()).replace()
        return wine

    async def wines_for_producer(self, producer_id: int) -> list[Wine]:
        docs = await WineDocument.find(
            WineDocument.producer_id == producer_id
        ).sort(+WineDocument.id).to_list()
        return [Wine.model_validate(doc.model_dump()) for doc in docs]

    async def get_producer(self, producer_id: int) -> Producer | None:
        doc = await ProducerDocument.get(producer_id)
        if doc is None:
            return None
        return Producer.model_validate(doc.model_dump())

    async def get_reference(self, kind: type[R], ref_id: int) -> R | None:
        document = REFERENCE_DOCUMENTS[kind]
        doc = await document.get(ref_id)
        if doc is None:
            return None
        return kind.model_validate(doc.model_dump())
