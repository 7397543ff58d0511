"""
Top‑level package for the SKU API.

All functionality lives in submodules under ``app``; the ASGI
application is ``sku_api.app.main:app``.
"""

__all__ = []
