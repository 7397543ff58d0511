"""
Abstract record store for SKU records.

A store only has to know how to load and save the whole collection;
the lookup and mutation helpers are built on those two primitives.
Every helper reloads the latest collection before acting and writes
the complete collection back after a change, so there is no cache to
go stale between requests.
"""

import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from sku_api.app.schemas.sku import SKURead


class SKURepository(ABC):
    """Interface shared by the file‑backed and in‑memory stores."""

    def __init__(self) -> None:
        # Guards load → mutate → save so two threads cannot interleave
        # their rewrites of the collection.
        self._lock = threading.RLock()

    @abstractmethod
    def load_all(self) -> List[SKURead]:
        """Return every stored record, or an empty list if none exist."""

    @abstractmethod
    def save_all(self, records: List[SKURead]) -> None:
        """Replace the stored collection with ``records``."""

    @staticmethod
    def _index_of(records: List[SKURead], key: str) -> int:
        for index, record in enumerate(records):
            if record.sku == key:
                return index
        return -1

    def find_by_key(self, key: str) -> Optional[SKURead]:
        records = self.load_all()
        index = self._index_of(records, key)
        return records[index] if index != -1 else None

    def insert(self, record: SKURead) -> SKURead:
        with self._lock:
            records = self.load_all()
            records.append(record)
            self.save_all(records)
        return record

    def replace(self, key: str, record: SKURead) -> Optional[SKURead]:
        """Overwrite the record stored under ``key`` in place.

        Returns ``None`` without writing anything if ``key`` is absent.
        """
        with self._lock:
            records = self.load_all()
            index = self._index_of(records, key)
            if index == -1:
                return None
            records[index] = record
            self.save_all(records)
        return record

    def remove_by_key(self, key: str) -> bool:
        with self._lock:
            records = self.load_all()
            index = self._index_of(records, key)
            if index == -1:
                return False
            del records[index]
            self.save_all(records)
        return True

    def rename_key(self, old_key: str, record: SKURead) -> Optional[SKURead]:
        """Move the record stored under ``old_key`` to ``record.sku``.

        The old entry is dropped and ``record`` appended in one
        ``save_all`` call, so the collection is never written without
        either of them.  Returns ``None`` if ``old_key`` is absent.
        """
        with self._lock:
            records = self.load_all()
            index = self._index_of(records, old_key)
            if index == -1:
                return None
            del records[index]
            records.append(record)
            self.save_all(records)
        return record
