"""
JSON file backed record store.

The whole collection lives in a single JSON array on disk.  Each call
to ``load_all`` re‑reads and re‑parses the file; each mutation rewrites
it completely.  Writes go to a temporary file in the same directory
which is then renamed over the target, so readers see either the old
or the new collection and an interrupted write leaves the old file in
place.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError as SchemaValidationError

from sku_api.app.core.exceptions import StorageError
from sku_api.app.schemas.sku import SKURead
from sku_api.app.storage.base import SKURepository

logger = logging.getLogger(__name__)


class JSONFileStorage(SKURepository):
    """Store SKU records in a JSON file at ``file_path``."""

    def __init__(self, file_path: Union[str, Path] = "data/skus.json") -> None:
        super().__init__()
        self.file_path = Path(file_path).resolve()

    def ensure_data_directory(self) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

    def load_all(self) -> List[SKURead]:
        try:
            raw = self.file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(f"Could not read {self.file_path}: {exc}") from exc

        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError("expected a JSON array of SKU records")
            return [SKURead.model_validate(item) for item in items]
        except (ValueError, TypeError, SchemaValidationError) as exc:
            raise StorageError(f"Could not parse {self.file_path}: {exc}") from exc

    def save_all(self, records: List[SKURead]) -> None:
        payload = json.dumps([record.to_json_dict() for record in records], indent=2)
        try:
            self.ensure_data_directory()
            fd, tmp_path = tempfile.mkstemp(
                dir=self.file_path.parent, prefix=f".{self.file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_path, self.file_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise StorageError(f"Could not write {self.file_path}: {exc}") from exc
        logger.debug("Wrote %d SKU records to %s", len(records), self.file_path)
