"""MongoDB database setup and Beanie ODM initialization."""

from typing import TYPE_CHECKING

from beanie import init_beanie
from pymongo import AsyncMongoClient

from mywinecellar.config import settings

if TYPE_CHECKING:
    from beanie import Document

# Global database client
client: AsyncMongoClient | None = None


def get_document_models() -> list[type["Document"]]:
    """Get all Beanie document models for initialization."""
    from mywinecellar.models import (
        ClosureDocument,
        ColorDocument,
        Counter,
        ProducerDocument,
        ShapeDocument,
        WineDocument,
        WineTypeDocument,
    )

    return [
        WineDocument,
        ProducerDocument,
        ShapeDocument,
        ColorDocument,
        WineTypeDocument,
        ClosureDocument,
        Counter,
    ]


async def init_db(
    mongodb_url: str | None = None,
    mongodb_database: str | None = None,
    mongo_client: AsyncMongoClient | None = None,
) -> None:
    """Initialize the MongoDB database connection and Beanie ODM.

    Args:
        mongodb_url: Optional MongoDB connection URL. Defaults to settings.
        mongodb_database: Optional database name. Defaults to settings.
        mongo_client: Optional pre-configured client (for testing).
    """
    global client

    if mongo_client is not None:
        client = mongo_client
    else:
        url = mongodb_url or settings.mongodb_url
        client = AsyncMongoClient(
            url,
            minPoolSize=settings.min_pool_size,
            maxPoolSize=settings.max_pool_size,
        )

    db_name = mongodb_database or settings.mongodb_database
    database = client[db_name]

    await init_beanie(
        database=database,
        document_models=get_document_models(),
    )


async def close_db() -> None:
    """Close the MongoDB database connection."""
    global client

    if client is not None:
        await client.close()
        client = None

