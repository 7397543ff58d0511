"""
Record stores for the SKU collection.

``SKURepository`` defines the interface; ``JSONFileStorage`` is the
production implementation and ``InMemoryStorage`` a drop‑in substitute
for tests.
"""

from .base import SKURepository
from .file_storage import JSONFileStorage
from .memory_storage import InMemoryStorage

__all__ = ["SKURepository", "JSONFileStorage", "InMemoryStorage"]
