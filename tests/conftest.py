"""Pytest configuration and fixtures for MyWineCellar tests.

Most tests run the write path against ``InMemoryCellarStore``. Tests that
need MongoDB use the ``init_test_db`` fixture, which skips when no server
is reachable at ``TEST_MONGODB_URL``.
"""

import itertools
import os
import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from beanie import init_beanie
from httpx import ASGITransport, AsyncClient
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from mywinecellar.database import get_document_models
from mywinecellar.entities import (
    Closure,
    Color,
    Producer,
    ReferenceEntity,
    Shape,
    Wine,
    WineType,
)
from mywinecellar.services.wine_service import WineService

# MongoDB connection URL for tests (can be overridden with env var)
TEST_MONGODB_URL = os.environ.get("TEST_MONGODB_URL", "mongodb://localhost:27017")

FIVE_MB = 5 * 1024 * 1024
DEFAULT_TAXONOMY_ID = 1


class InMemoryCellarStore:
    """CellarStore kept in dictionaries.

    Reads and writes copy entities so that callers never share state with
    what is "persisted".
    """

    def __init__(self) -> None:
        self.wines: dict[int, Wine] = {}
        self.producers: dict[int, Producer] = {}
        self.references: dict[type[ReferenceEntity], dict[int, ReferenceEntity]] = {
            Shape: {},
            Color: {},
            WineType: {},
            Closure: {},
        }
        self._ids = itertools.count(1)
        self.inserts = 0
        self.updates = 0

    # Fixture helpers

    def add_producer(self, producer_id: int, name: str) -> Producer:
        producer = Producer(id=producer_id, name=name)
        self.producers[producer_id] = producer
        return producer

    def add_reference(self, kind: type[ReferenceEntity], ref_id: int, name: str) -> None:
        self.references[kind][ref_id] = kind(id=ref_id, name=name)

    def put_wine(self, wine: Wine) -> Wine:
        self.wines[wine.id] = wine.model_copy(deep=True)
        return wine

    # CellarStore

    async def get_wine(self, wine_id: int) -> Wine | None:
        wine = self.wines.get(wine_id)
        return wine.model_copy(deep=True) if wine else None

    async def insert_wine(self, wine: Wine) -> Wine:
        wine_id = next(self._ids)
        while wine_id in self.wines:
            wine_id = next(self._ids)
        stored = wine.model_copy(update={"id": wine_id})
        self.wines[wine_id] = stored.model_copy(deep=True)
        self.inserts += 1
        return stored

    async def update_wine(self, wine: Wine) -> Wine:
        if wine.id not in self.wines:
            raise KeyError(wine.id)
        self.wines[wine.id] = wine.model_copy(deep=True)
        self.updates += 1
        return wine

    async def wines_for_producer(self, producer_id: int) -> list[Wine]:
        return [
            wine.model_copy(deep=True)
            for wine_id, wine in sorted(self.wines.items())
            if wine.producer_id == producer_id
        ]

    async def get_producer(self, producer_id: int) -> Producer | None:
        return self.producers.get(producer_id)

    async def get_reference(self, kind, ref_id):
        return self.references[kind].get(ref_id)


@pytest.fixture
def store() -> InMemoryCellarStore:
    """Store seeded with producer 42 and two entries of each taxonomy kind."""
    store = InMemoryCellarStore()
    store.add_producer(42, "Chateau Test")
    store.add_producer(43, "Domaine Other")
    for kind, names in (
        (Shape, ["Bordeaux", "Burgundy"]),
        (Color, ["Red", "White"]),
        (WineType, ["Still", "Sparkling"]),
        (Closure, ["Natural cork", "Screw cap"]),
    ):
        for ref_id, name in enumerate(names, start=DEFAULT_TAXONOMY_ID):
            store.add_reference(kind, ref_id, name)
    return store


@pytest.fixture
def service(store: InMemoryCellarStore) -> WineService:
    return WineService(store, default_taxonomy_id=DEFAULT_TAXONOMY_ID, max_image_bytes=FIVE_MB)


@pytest.fixture
def existing_wine(store: InMemoryCellarStore) -> Wine:
    """Wine 7 of producer 42, wired to the default taxonomy."""
    return store.put_wine(
        Wine(
            id=7,
            name="Clos Existing",
            vintage=2010,
            size=750,
            alcohol=13.5,
            description="Dense and dark",
            image=b"previous-image",
            producer_id=42,
            shape_id=1,
            color_id=1,
            type_id=1,
            closure_id=1,
        )
    )


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the upload rate limiter between tests."""
    from mywinecellar.routers._common import limiter

    limiter.reset()
    yield


@pytest_asyncio.fixture(scope="function")
async def client(service: WineService) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with the wine service bound to the in-memory store."""
    from mywinecellar.main import app
    from mywinecellar.routers._common import get_wine_service

    app.dependency_overrides[get_wine_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sample_image_bytes() -> bytes:
    """Create sample image bytes for testing."""
    # Minimal valid PNG (1x1 pixel, red)
    png_data = bytes([
        0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,  # PNG signature
        0x00, 0x00, 0x00, 0x0D,  # IHDR length
        0x49, 0x48, 0x44, 0x52,  # IHDR
        0x00, 0x00, 0x00, 0x01,  # width: 1
        0x00, 0x00, 0x00, 0x01,  # height: 1
        0x08, 0x02,  # bit depth: 8, color type: RGB
        0x00, 0x00, 0x00,  # compression, filter, interlace
        0x90, 0x77, 0x53, 0xDE,  # CRC
        0x00, 0x00, 0x00, 0x0C,  # IDAT length
        0x49, 0x44, 0x41, 0x54,  # IDAT
        0x08, 0xD7, 0x63, 0xF8, 0xFF, 0xFF, 0x3F, 0x00,  # compressed data
        0x05, 0xFE, 0x02, 0xFE,  # CRC
        0xA3, 0x1A, 0x8D, 0xEB,  # CRC
        0x00, 0x00, 0x00, 0x00,  # IEND length
        0x49, 0x45, 0x4E, 0x44,  # IEND
        0xAE, 0x42, 0x60, 0x82,  # CRC
    ])
    return png_data


@pytest_asyncio.fixture(scope="function")
async def mongo_client():
    """MongoDB client for tests; skips the test when no server answers."""
    client = AsyncMongoClient(TEST_MONGODB_URL, serverSelectionTimeoutMS=500)
    try:
        await client.admin.command("ping")
    except PyMongoError:
        await client.close()
        pytest.skip(f"MongoDB not reachable at {TEST_MONGODB_URL}")
    yield client
    await client.close()


@pytest_asyncio.fixture(scope="function")
async def init_test_db(mongo_client):
    """Initialize Beanie with a unique test database, dropped afterwards."""
    db_name = f"test_mywinecellar_{uuid.uuid4().hex[:8]}"
    db = mongo_client[db_name]

    await init_beanie(
        database=db,
        document_models=get_document_models(),
    )
    yield db

    await mongo_client.drop_database(db_name)
