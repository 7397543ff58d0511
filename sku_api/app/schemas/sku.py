"""
Pydantic schemas for SKU records.

A SKU is identified by its ``sku`` code, which is unique across the
collection.  ``price`` is kept as text exactly as the client sent it;
it is never parsed into a number.  Timestamps are exchanged as ISO‑8601
strings under the camelCase keys ``createdAt`` and ``updatedAt``, both
over HTTP and in the backing JSON file.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SKUCreate(BaseModel):
    """Schema for creating a SKU.

    Every field is optional here so that the endpoint can answer a
    missing or empty field with its own 400 instead of FastAPI's 422.
    """

    sku: Optional[str] = Field(None, description="Unique SKU code")
    description: Optional[str] = Field(None, description="Human readable product description")
    price: Optional[str] = Field(None, description="Price as decimal text, e.g. '1.99'")

    def missing_fields(self) -> list:
        """Return the names of required fields that are absent or empty."""
        return [name for name in ("sku", "description", "price") if not getattr(self, name)]


class SKUUpdate(SKUCreate):
    """Schema for updating (and possibly renaming) an existing SKU."""


class SKURead(BaseModel):
    """Schema for a stored SKU record."""

    # Keys this model does not declare are kept and written back unchanged.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[Union[str, int]] = None
    sku: str
    description: str
    price: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Timestamps written without an offset are taken to be UTC.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def to_json_dict(self) -> dict:
        """Return the record in its on‑disk/over‑the‑wire JSON form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
