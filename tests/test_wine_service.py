"""Tests for the wine write service against the in-memory store."""

import logging

import pytest

from mywinecellar.entities import Wine
from mywinecellar.exceptions import BadRequestError, NotFoundError
from mywinecellar.schemas.wine import WineRequest
from mywinecellar.services.wine_service import WineService

from conftest import FIVE_MB, InMemoryCellarStore


class TestCreate:
    """Tests for WineService.create."""

    @pytest.mark.asyncio
    async def test_create_with_default_taxonomy(self, service, store):
        request = WineRequest(name="Chateau X", vintage=2015, size=750)

        wine = await service.create(request, producer_id=42)

        assert wine.id is not None
        assert wine.name == "Chateau X"
        assert wine.vintage == 2015
        assert wine.size == 750
        assert wine.producer_id == 42
        assert (wine.shape_id, wine.color_id, wine.type_id, wine.closure_id) == (1, 1, 1, 1)
        assert store.wines[wine.id] == wine

    @pytest.mark.asyncio
    async def test_created_wine_listed_for_producer(self, service):
        wine = await service.create(WineRequest(name="Chateau X", size=750), producer_id=42)

        producer_wines = await service.producer_wines(42)

        assert [w.id for w in producer_wines] == [wine.id]
        assert await service.producer_wines(43) == []

    @pytest.mark.asyncio
    async def test_create_with_explicit_taxonomy(self, service):
        wine = await service.create(
            WineRequest(name="Cremant", size=750),
            producer_id=43,
            shape_id=2,
            color_id=2,
            type_id=2,
            closure_id=2,
        )

        assert (wine.shape_id, wine.color_id, wine.type_id, wine.closure_id) == (2, 2, 2, 2)

    @pytest.mark.asyncio
    async def test_each_taxonomy_id_defaults_independently(self, service):
        wine = await service.create(WineRequest(name="Mixed", size=750), producer_id=42, color_id=2)

        assert (wine.shape_id, wine.color_id, wine.type_id, wine.closure_id) == (1, 2, 1, 1)

    @pytest.mark.asyncio
    async def test_configured_default_id(self, store):
        service = WineService(store, default_taxonomy_id=2, max_image_bytes=FIVE_MB)

        wine = await service.create(WineRequest(name="Defaults", size=750), producer_id=42)

        assert (wine.shape_id, wine.color_id, wine.type_id, wine.closure_id) == (2, 2, 2, 2)

    @pytest.mark.asyncio
    async def test_missing_payload(self, service, store):
        with pytest.raises(BadRequestError) as exc_info:
            await service.create(None, producer_id=42)

        assert exc_info.value.message == "wine request was null"
        assert store.inserts == 0

    @pytest.mark.asyncio
    async def test_missing_required_field(self, service, store):
        with pytest.raises(BadRequestError):
            await service.create(WineRequest(name="No size"), producer_id=42)

        assert store.inserts == 0

    @pytest.mark.asyncio
    async def test_unknown_producer(self, service, store):
        with pytest.raises(NotFoundError) as exc_info:
            await service.create(WineRequest(name="Orphan", size=750), producer_id=999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "producer with id 999 not found"
        assert store.inserts == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs, kind",
        [
            ({"shape_id": 9}, "shape"),
            ({"color_id": 9}, "color"),
            ({"type_id": 9}, "type"),
            ({"closure_id": 9}, "closure"),
        ],
    )
    async def test_unknown_taxonomy_commits_nothing(self, service, store, kwargs, kind):
        with pytest.raises(NotFoundError) as exc_info:
            await service.create(WineRequest(name="Half wired", size=750), producer_id=42, **kwargs)

        assert exc_info.value.message == f"{kind} with id 9 not found"
        assert store.wines == {}
        assert await service.producer_wines(42) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs, kind",
        [
            ({"shape_id": 0}, "shape"),
            ({"color_id": 0}, "color"),
            ({"type_id": 0}, "type"),
            ({"closure_id": 0}, "closure"),
        ],
    )
    async def test_zero_taxonomy_id_is_looked_up(self, service, store, kwargs, kind):
        with pytest.raises(NotFoundError) as exc_info:
            await service.create(WineRequest(name="Zero", size=750), producer_id=42, **kwargs)

        assert exc_info.value.message == f"{kind} with id 0 not found"
        assert store.inserts == 0

    @pytest.mark.asyncio
    async def test_zero_default_id_is_kept(self, store):
        service = WineService(store, default_taxonomy_id=0, max_image_bytes=FIVE_MB)

        assert service.default_taxonomy_id == 0
        with pytest.raises(NotFoundError) as exc_info:
            await service.create(WineRequest(name="Zero", size=750), producer_id=42)

        assert exc_info.value.message == "shape with id 0 not found"

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, service):
        first = await service.create(WineRequest(name="One", size=750), producer_id=42)
        second = await service.create(WineRequest(name="Two", size=750), producer_id=42)

        assert first.id != second.id


class TestEdit:
    """Tests for WineService.edit."""

    @pytest.mark.asyncio
    async def test_edit_overwrites_present_fields(self, service, store, existing_wine):
        wine = await service.edit(7, WineRequest(name="Clos Renamed", vintage=2011))

        assert wine.name == "Clos Renamed"
        assert wine.vintage == 2011
        assert store.wines[7].name == "Clos Renamed"

    @pytest.mark.asyncio
    async def test_edit_leaves_absent_fields(self, service, existing_wine):
        wine = await service.edit(7, WineRequest(size=1500))

        assert wine.model_dump() == existing_wine.model_copy(update={"size": 1500}).model_dump()
        assert wine.image == b"previous-image"

    @pytest.mark.asyncio
    async def test_edit_keeps_timestamps(self, service, existing_wine):
        wine = await service.edit(7, WineRequest(alcohol=14.0))

        assert wine.updated_at == existing_wine.updated_at
        assert wine.created_at == existing_wine.created_at

    @pytest.mark.asyncio
    async def test_edit_is_idempotent(self, service, store, existing_wine):
        request = WineRequest(name="Clos Twice", description="Same again")

        once = await service.edit(7, request)
        twice = await service.edit(7, request)

        assert twice.model_dump() == once.model_dump()
        assert store.wines[7] == once

    @pytest.mark.asyncio
    async def test_edit_never_rewires(self, service, existing_wine):
        wine = await service.edit(7, WineRequest.model_validate({"name": "X", "producer_id": 43}))

        assert wine.producer_id == 42
        assert [w.id for w in await service.producer_wines(42)] == [7]

    @pytest.mark.asyncio
    async def test_missing_payload_names_wine(self, service, store):
        with pytest.raises(BadRequestError) as exc_info:
            await service.edit(185, None)

        assert exc_info.value.message == "wine request for id 185 was null"
        assert store.updates == 0

    @pytest.mark.asyncio
    async def test_unknown_wine(self, service, store):
        with pytest.raises(NotFoundError) as exc_info:
            await service.edit(404, WineRequest(name="Ghost"))

        assert exc_info.value.message == "wine with id 404 not found"
        assert store.updates == 0


class TestAttachImage:
    """Tests for WineService.attach_image."""

    @pytest.mark.asyncio
    async def test_attach_replaces_image(self, service, store, existing_wine, sample_image_bytes):
        wine = await service.attach_image(7, sample_image_bytes)

        assert wine.image == sample_image_bytes
        assert store.wines[7].image == sample_image_bytes
        assert wine.name == existing_wine.name

    @pytest.mark.asyncio
    async def test_largest_accepted_size(self, service, existing_wine):
        payload = b"\x00" * (FIVE_MB - 1)

        wine = await service.attach_image(7, payload)

        assert len(wine.image) == 5_242_879

    @pytest.mark.asyncio
    async def test_exact_limit_rejected(self, service, store, existing_wine):
        with pytest.raises(BadRequestError) as exc_info:
            await service.attach_image(7, b"\x00" * 5_242_880)

        assert exc_info.value.message == "image cannot exceed 5MB"
        assert store.wines[7].image == b"previous-image"
        assert store.updates == 0

    @pytest.mark.asyncio
    async def test_oversize_logged_at_debug(self, service, existing_wine, caplog):
        with caplog.at_level(logging.DEBUG, logger="mywinecellar.services.wine_service"):
            with pytest.raises(BadRequestError):
                await service.attach_image(7, b"\x00" * (6 * 1024 * 1024))

        records = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("wine 7" in r.getMessage() for r in records)

    @pytest.mark.asyncio
    async def test_missing_file(self, service, existing_wine):
        with pytest.raises(BadRequestError) as exc_info:
            await service.attach_image(7, None)

        assert exc_info.value.message == "image file was not included on the request"

    @pytest.mark.asyncio
    async def test_empty_file_is_a_payload(self, service, existing_wine):
        wine = await service.attach_image(7, b"")

        assert wine.image == b""

    @pytest.mark.asyncio
    async def test_unknown_wine(self, service, sample_image_bytes):
        with pytest.raises(NotFoundError):
            await service.attach_image(8, sample_image_bytes)


class TestStoreFailures:
    """Store errors are not converted into client errors."""

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, store, existing_wine):
        class BrokenStore(InMemoryCellarStore):
            async def update_wine(self, wine: Wine) -> Wine:
                raise ConnectionError("store unavailable")

        broken = BrokenStore()
        broken.wines = store.wines
        service = WineService(broken, default_taxonomy_id=1, max_image_bytes=FIVE_MB)

        with pytest.raises(ConnectionError):
            await service.edit(7, WineRequest(name="Lost"))
