import json
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from sku_api.app.api.dependencies import get_sku_service
from sku_api.app.main import create_app
from sku_api.app.schemas.sku import SKURead
from sku_api.app.services.sku_service import SKUService
from sku_api.app.storage import InMemoryStorage, JSONFileStorage

SEED_SKUS = [
    {
        "sku": "glazed",
        "description": "Glazed donut",
        "price": "1.99",
        "createdAt": "2024-01-15T10:00:00.000Z",
        "updatedAt": "2024-01-15T10:00:00.000Z",
    },
    {
        "sku": "chocolate",
        "description": "Chocolate frosted donut",
        "price": "2.49",
        "createdAt": "2024-01-15T10:05:00.000Z",
        "updatedAt": "2024-01-16T08:30:00.000Z",
    },
    {
        "sku": "boston-cream",
        "description": "Boston cream donut",
        "price": "2.99",
        "createdAt": "2024-01-15T10:10:00.000Z",
        "updatedAt": "2024-01-15T10:10:00.000Z",
    },
    {
        "sku": "berliner",
        "description": "Jelly filled berliner",
        "price": "2.79",
        "createdAt": "2024-01-15T10:15:00.000Z",
        "updatedAt": "2024-01-15T10:15:00.000Z",
    },
    {
        "sku": "cruller",
        "description": "French cruller",
        "price": "2.29",
        "createdAt": "2024-01-15T10:20:00.000Z",
        "updatedAt": "2024-01-15T10:20:00.000Z",
    },
]

SEED_CODES = [item["sku"] for item in SEED_SKUS]


def make_sku(code: str, description: str = "Test donut", price: str = "1.00") -> SKURead:
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return SKURead(sku=code, description=description, price=price, created_at=stamp, updated_at=stamp)


def read_data_file(path) -> list:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def data_file(tmp_path):
    """A JSON data file seeded with the donut SKUs."""
    path = tmp_path / "data" / "skus.json"
    path.parent.mkdir()
    path.write_text(json.dumps(SEED_SKUS, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def file_storage(data_file):
    return JSONFileStorage(data_file)


@pytest.fixture
def memory_storage():
    return InMemoryStorage(SKURead.model_validate(item) for item in SEED_SKUS)


@pytest.fixture
def service(memory_storage):
    return SKUService(memory_storage)


@pytest.fixture
def app():
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app, file_storage):
    sku_service = SKUService(file_storage)
    app.dependency_overrides[get_sku_service] = lambda: sku_service
    with TestClient(app) as test_client:
        yield test_client
