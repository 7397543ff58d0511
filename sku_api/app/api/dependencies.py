"""
API dependencies.

Provides the ``SKUService`` used by the endpoints.  The service and its
JSON file store are created once per process from ``settings``; tests
replace them through ``app.dependency_overrides[get_sku_service]``.
"""

from functools import lru_cache

from sku_api.app.core.config import settings
from sku_api.app.services.sku_service import SKUService
from sku_api.app.storage import JSONFileStorage


@lru_cache()
def get_sku_service() -> SKUService:
    """Return the process‑wide SKU service backed by ``settings.data_file``."""
    return SKUService(JSONFileStorage(settings.data_file))
