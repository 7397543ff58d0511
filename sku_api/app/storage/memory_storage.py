"""In‑memory record store, interchangeable with ``JSONFileStorage``."""

from typing import Iterable, List, Optional

from sku_api.app.schemas.sku import SKURead
from sku_api.app.storage.base import SKURepository


class InMemoryStorage(SKURepository):
    """Keep the collection in a list.

    Records are copied on the way in and out so callers can never
    mutate the stored collection behind the store's back, matching the
    reload‑on‑every‑call behaviour of the file store.
    """

    def __init__(self, records: Optional[Iterable[SKURead]] = None) -> None:
        super().__init__()
        self._records: List[SKURead] = [record.model_copy() for record in records or []]

    def load_all(self) -> List[SKURead]:
        return [record.model_copy() for record in self._records]

    def save_all(self, records: List[SKURead]) -> None:
        self._records = [record.model_copy() for record in records]
