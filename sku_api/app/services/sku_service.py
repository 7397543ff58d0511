"""
Service layer for SKU records.

``SKUService`` enforces the business rules on top of a record store:
SKU codes are unique, ``created_at`` is set once and never changes,
and ``updated_at`` is refreshed on every successful modification,
including a rename of the SKU code.  Field formats (price, description
length) are not checked here; the API layer only requires that the
fields are present and non‑empty.

Mutations are serialised through an ``asyncio.Lock`` so that the
"check for an existing code, then write" sequence of one request cannot
interleave with another request in the same process.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sku_api.app.core.exceptions import ConflictError, NotFoundError
from sku_api.app.schemas.sku import SKUCreate, SKURead, SKUUpdate
from sku_api.app.storage.base import SKURepository

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SKUService:
    """Create, read, update and delete SKU records by code."""

    def __init__(self, storage: SKURepository) -> None:
        self.storage = storage
        self._write_lock = asyncio.Lock()

    async def list_all(self) -> List[SKURead]:
        """Return every stored SKU, in storage order."""
        return self.storage.load_all()

    async def get_by_code(self, code: str) -> Optional[SKURead]:
        return self.storage.find_by_key(code)

    async def create(self, data: SKUCreate) -> SKURead:
        """Store a new SKU.

        Raises ``ConflictError`` if a record with ``data.sku`` already
        exists; the collection is left untouched in that case.
        """
        async with self._write_lock:
            if self.storage.find_by_key(data.sku) is not None:
                raise ConflictError.for_code(data.sku)

            now = utcnow()
            record = SKURead(
                sku=data.sku,
                description=data.description,
                price=data.price,
                created_at=now,
                updated_at=now,
            )
            self.storage.insert(record)
        logger.info("Created SKU %s", record.sku)
        return record

    async def update(self, target_code: str, data: SKUUpdate) -> SKURead:
        """Update the SKU stored under ``target_code``.

        When ``data.sku`` differs from ``target_code`` the record is
        renamed.  ``created_at`` (and any stored ``id``) is carried over
        from the existing record.

        Raises ``NotFoundError`` if ``target_code`` does not exist and
        ``ConflictError`` if a rename would collide with another record.
        """
        async with self._write_lock:
            existing = self.storage.find_by_key(target_code)
            if existing is None:
                raise NotFoundError("SKU not found for update")

            renaming = data.sku != target_code
            if renaming and self.storage.find_by_key(data.sku) is not None:
                raise ConflictError.for_code(data.sku)

            record = SKURead(
                id=existing.id,
                sku=data.sku,
                description=data.description,
                price=data.price,
                created_at=existing.created_at,
                updated_at=max(utcnow(), existing.created_at),
            )
            if renaming:
                stored = self.storage.rename_key(target_code, record)
            else:
                stored = self.storage.replace(target_code, record)
            if stored is None:
                # Removed by another process between the lookup and the write.
                raise NotFoundError("SKU not found for update")

        if renaming:
            logger.info("Renamed SKU %s to %s", target_code, record.sku)
        else:
            logger.info("Updated SKU %s", record.sku)
        return record

    async def delete(self, code: str) -> bool:
        """Delete the SKU stored under ``code``.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        async with self._write_lock:
            deleted = self.storage.remove_by_key(code)
        if deleted:
            logger.info("Deleted SKU %s", code)
        return deleted
