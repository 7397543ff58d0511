import asyncio

import pytest

from sku_api.app.core.exceptions import ConflictError, NotFoundError
from sku_api.app.schemas.sku import SKUCreate, SKUUpdate
from sku_api.app.services.sku_service import SKUService
from sku_api.app.storage import InMemoryStorage
from tests.conftest import SEED_CODES


def run(coro):
    return asyncio.run(coro)


class TestSKUServiceRead:
    def test_list_all_returns_everything(self, service):
        records = run(service.list_all())
        assert [record.sku for record in records] == SEED_CODES

    def test_list_all_on_empty_store(self):
        assert run(SKUService(InMemoryStorage()).list_all()) == []

    def test_get_by_code(self, service):
        assert run(service.get_by_code("glazed")).description == "Glazed donut"

    def test_get_by_unknown_code(self, service):
        assert run(service.get_by_code("missing")) is None


class TestSKUServiceCreate:
    def test_create_then_read_back(self, service):
        created = run(service.create(SKUCreate(sku="maple", description="Maple bar", price="2.19")))
        fetched = run(service.get_by_code("maple"))

        assert (fetched.sku, fetched.description, fetched.price) == ("maple", "Maple bar", "2.19")
        assert created.created_at == created.updated_at
        assert fetched.created_at == fetched.updated_at

    def test_create_duplicate_conflicts_and_leaves_collection(self, service):
        before = run(service.list_all())
        with pytest.raises(ConflictError) as excinfo:
            run(service.create(SKUCreate(sku="glazed", description="Another", price="9.99")))

        assert "glazed" in excinfo.value.message
        assert "already exists" in excinfo.value.message
        assert run(service.list_all()) == before

    def test_concurrent_creates_of_same_code(self, service):
        async def create_twice():
            payload = SKUCreate(sku="maple", description="Maple bar", price="2.19")
            return await asyncio.gather(
                service.create(payload), service.create(payload), return_exceptions=True
            )

        results = run(create_twice())
        assert sum(isinstance(result, ConflictError) for result in results) == 1
        codes = [record.sku for record in run(service.list_all())]
        assert codes.count("maple") == 1


class TestSKUServiceUpdate:
    def test_update_preserves_created_at(self, service):
        original = run(service.get_by_code("chocolate"))
        updated = run(
            service.update("chocolate", SKUUpdate(sku="chocolate", description="Dark chocolate", price="2.99"))
        )

        assert updated.created_at == original.created_at
        assert updated.updated_at >= updated.created_at
        assert updated.updated_at > original.updated_at
        assert run(service.get_by_code("chocolate")).description == "Dark chocolate"

    def test_update_keeps_position(self, service):
        run(service.update("boston-cream", SKUUpdate(sku="boston-cream", description="Extra filling", price="4.99")))
        assert [record.sku for record in run(service.list_all())] == SEED_CODES

    def test_update_missing_target(self, service):
        with pytest.raises(NotFoundError) as excinfo:
            run(service.update("missing", SKUUpdate(sku="missing", description="x", price="1")))
        assert "not found" in excinfo.value.message

    def test_rename(self, service):
        original = run(service.get_by_code("berliner"))
        renamed = run(
            service.update("berliner", SKUUpdate(sku="berliner-premium", description="Premium jelly", price="3.99"))
        )

        assert run(service.get_by_code("berliner")) is None
        assert run(service.get_by_code("berliner-premium")).description == "Premium jelly"
        assert renamed.created_at == original.created_at
        assert len(run(service.list_all())) == len(SEED_CODES)

    def test_rename_to_existing_code_conflicts(self, service):
        before = run(service.list_all())
        with pytest.raises(ConflictError) as excinfo:
            run(service.update("berliner", SKUUpdate(sku="glazed", description="Dup", price="1")))

        assert "glazed" in excinfo.value.message
        assert run(service.list_all()) == before

    def test_update_preserves_surrogate_id(self):
        storage = InMemoryStorage()
        service = SKUService(storage)
        record = run(service.create(SKUCreate(sku="plain", description="Plain", price="1.00")))
        storage.replace("plain", record.model_copy(update={"id": "42"}))

        updated = run(service.update("plain", SKUUpdate(sku="plain-2", description="Plain", price="1.10")))
        assert updated.id == "42"


class TestSKUServiceDelete:
    def test_delete_existing(self, service):
        assert run(service.delete("glazed")) is True
        assert len(run(service.list_all())) == len(SEED_CODES) - 1
        assert run(service.get_by_code("glazed")) is None

    def test_delete_missing(self, service):
        assert run(service.delete("missing")) is False
        assert len(run(service.list_all())) == len(SEED_CODES)


class TestSKUServiceWriteLock:
    def test_contended_write_waits_for_lock(self, service):
        async def contend():
            async with service._write_lock:
                pending = asyncio.ensure_future(service.delete("glazed"))
                await asyncio.sleep(0)
                assert not pending.done()
            return await pending

        assert run(contend()) is True
        assert run(service.get_by_code("glazed")) is None
