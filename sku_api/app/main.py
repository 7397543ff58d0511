"""
Main entrypoint for the SKU API.

This module assembles the FastAPI application: it sets up logging,
installs the CORS middleware and exception handlers and includes the
versioned router.  ``create_app`` builds and configures the app, which
is then instantiated at module import time as ``app``, e.g.::

    uvicorn sku_api.app.main:app --reload
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that request handling
    # can log from the start.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
