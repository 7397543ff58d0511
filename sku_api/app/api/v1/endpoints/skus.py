"""
SKU endpoints.

These routes expose CRUD operations over the SKU collection.  Creation
and update share ``POST /skus``: without a ``target`` query parameter a
new SKU is created, with ``?target=<code>`` the SKU stored under that
code is updated (and renamed if the body carries a different ``sku``).
Errors are raised as the exceptions in ``core.exceptions`` and rendered
as ``{"error": <message>}`` by the application's exception handlers.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from sku_api.app.api.dependencies import get_sku_service
from sku_api.app.core.exceptions import MISSING_FIELDS_MESSAGE, NotFoundError, ValidationError
from sku_api.app.schemas.sku import SKUCreate, SKURead, SKUUpdate
from sku_api.app.services.sku_service import SKUService

router = APIRouter()


def _require_fields(payload: SKUCreate) -> None:
    if payload.missing_fields():
        raise ValidationError(MISSING_FIELDS_MESSAGE)


# ``GET /skus/`` (an empty code) is served by the list route as well.
@router.get("", response_model=List[SKURead], response_model_exclude_none=True)
@router.get("/", response_model=List[SKURead], response_model_exclude_none=True, include_in_schema=False)
async def list_skus(service: SKUService = Depends(get_sku_service)) -> List[SKURead]:
    """Return every SKU.  An empty or missing data file yields ``[]``."""
    return await service.list_all()


@router.get("/{code}", response_model=SKURead, response_model_exclude_none=True)
async def get_sku(code: str, service: SKUService = Depends(get_sku_service)) -> SKURead:
    """Retrieve a single SKU by code; 404 if it does not exist."""
    sku = await service.get_by_code(code)
    if sku is None:
        raise NotFoundError()
    return sku


@router.post("", response_model=SKURead, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=SKURead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_or_update_sku(
    payload: SKUCreate,
    response: Response,
    target: Optional[str] = Query(None, description="Code of an existing SKU to update"),
    service: SKUService = Depends(get_sku_service),
) -> SKURead:
    """Create a SKU, or update the one named by ``target``.

    Creation answers 201, or 409 if the code is taken.  Update answers
    200, 404 if ``target`` does not exist, or 409 if the new code
    belongs to another SKU.  Both answer 400 when ``sku``,
    ``description`` or ``price`` is missing or empty.
    """
    _require_fields(payload)
    if target:
        response.status_code = status.HTTP_200_OK
        return await service.update(target, SKUUpdate(**payload.model_dump()))
    return await service.create(payload)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sku(code: str, service: SKUService = Depends(get_sku_service)) -> Response:
    """Delete a SKU by code; 404 if it does not exist."""
    deleted = await service.delete(code)
    if not deleted:
        raise NotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
