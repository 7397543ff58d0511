"""Entry point for the SKU API server.

Launches the FastAPI application with Uvicorn.  Host, port and
autoreload are read from the ``HOST``, ``PORT`` and ``RELOAD``
environment variables (see ``sku_api.app.core.config``); the backing
data file is chosen with ``DATA_FILE``.

Usage:
    python run.py
"""
import logging

import uvicorn

from sku_api.app.core.config import settings
from sku_api.app.core.logging_config import setup_logging


def main() -> None:
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)
    logger.info("SKU API server running on http://%s:%s", settings.host, settings.port)
    logger.info("API base URL: http://%s:%s/api/skus", settings.host, settings.port)
    logger.info("Health check: http://%s:%s/health", settings.host, settings.port)
    logger.info("Data file: %s", settings.data_file)
    uvicorn.run(
        "sku_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
