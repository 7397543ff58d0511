"""
Error taxonomy and the FastAPI handlers that render it.

Services raise the exceptions below; ``register_exception_handlers``
turns each of them into a JSON body of the form ``{"error": <message>}``
with the matching HTTP status.  Anything that is not recognised is
logged and surfaced as a generic 500 so that internal details never
reach the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
MISSING_FIELDS_MESSAGE = "Missing required fields: sku, description, and price are required"


class SKUAPIError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SKUAPIError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(SKUAPIError):
    """No record exists for the given SKU code."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "SKU not found") -> None:
        super().__init__(message)


class ConflictError(SKUAPIError):
    """The SKU code is already held by another record."""

    status_code = status.HTTP_409_CONFLICT

    @classmethod
    def for_code(cls, code: str) -> "ConflictError":
        return cls(f"SKU with code '{code}' already exists")


class InternalError(SKUAPIError):
    """Unexpected failure; the message is logged but never returned."""


class StorageError(InternalError):
    """The backing file could not be read, parsed or written."""


def _error_body(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def sku_api_error_handler(request: Request, exc: SKUAPIError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return _error_body(INTERNAL_ERROR_MESSAGE, exc.status_code)
    return _error_body(exc.message, exc.status_code)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # FastAPI reports unparsable bodies and wrongly typed fields as 422;
    # clients of this API expect the same 400 as for missing fields.
    logger.debug("Rejected request body for %s: %s", request.url.path, exc.errors())
    return _error_body(MISSING_FIELDS_MESSAGE, status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_body(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers above to ``app``."""
    app.add_exception_handler(SKUAPIError, sku_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
