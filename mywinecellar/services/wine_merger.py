"""Merging of sparse wine requests into wine entities."""

from mywinecellar.entities import Wine
from mywinecellar.exceptions import BadRequestError
from mywinecellar.schemas.wine import WineRequest

REQUIRED_ON_CREATE = ("name", "size")


def merge(existing: Wine | None, update: WineRequest) -> Wine:
    """Produce a wine from an optional existing wine and a sparse update.

    With no existing wine, a new one is built from the update; ``name`` and
    ``size`` must be provided. Otherwise a copy of ``existing`` is returned
    with every non-null update field overwritten. Associations and the
    image are never touched, and ``existing`` is not modified.

    Raises:
        BadRequestError: If a required field is missing on create.
    """
    changes = update.provided_fields()

    if existing is None:
        missing = [field for field in REQUIRED_ON_CREATE if field not in changes]
        if missing:
            raise BadRequestError(
                f"wine request is missing required field(s): {', '.join(missing)}",
                details={"missing": missing},
            )
        return Wine(**changes)

    return existing.model_copy(update=changes)
