"""Seeding of the taxonomy reference collections.

Each kind is seeded with a short canonical list whose first entry takes
id 1, the default used when a new wine names no taxonomy. Existing
documents are never overwritten.
"""

import logging

from mywinecellar.models import (
    ClosureDocument,
    ColorDocument,
    ReferenceDocument,
    ShapeDocument,
    WineTypeDocument,
)

logger = logging.getLogger(__name__)

REFERENCE_DATA: dict[type[ReferenceDocument], list[str]] = {
    ShapeDocument: ["Bordeaux", "Burgundy", "Alsace", "Champagne", "Port", "Bocksbeutel"],
    ColorDocument: ["Red", "White", "Rosé", "Orange"],
    WineTypeDocument: ["Still", "Sparkling", "Fortified", "Dessert"],
    ClosureDocument: ["Natural cork", "Synthetic cork", "Screw cap", "Glass stopper", "Crown cap"],
}


async def seed_reference_data(default_id: int = 1) -> int:
    """Insert any missing reference documents.

    Names are assigned consecutive ids starting at ``default_id``, so the
    first name of each kind is the default.

    Returns:
        Number of documents inserted.
    """
    inserted = 0
    for document, names in REFERENCE_DATA.items():
        for offset, name in enumerate(names):
            ref_id = default_id + offset
            if await document.get(ref_id) is not None:
                continue
            await document(id=ref_id, name=name).insert()
            inserted += 1

    if inserted:
        logger.info("Seeded %d reference documents", inserted)
    return inserted
