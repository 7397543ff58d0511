"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  The
application mounts it at ``/api`` so that SKU routes are served from
``/api/skus``, the paths existing clients already use.
"""

from fastapi import APIRouter

from .endpoints import skus

router = APIRouter()

router.include_router(skus.router, prefix="/skus", tags=["skus"])
