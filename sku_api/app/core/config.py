"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, storing its records in
``data/skus.json`` under the current working directory.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SKU API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON file holding the SKU collection.  Relative paths
    # are resolved against the working directory of the server process.
    data_file: str = os.getenv("DATA_FILE", "data/skus.json")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    reload: bool = os.getenv("RELOAD", "false").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
