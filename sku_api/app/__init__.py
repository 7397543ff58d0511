"""
Application package initializer.

The package is organised by layer: ``core`` (configuration, logging,
errors), ``storage`` (record stores), ``services`` (business rules),
``schemas`` (pydantic models) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
