"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection functions for API endpoints.

The catalog service lives on ``app.state`` so that every application
instance owns its own catalog; nothing is kept in module globals.

==============================================================================
"""

from __future__ import annotations

from fastapi import Request

from catalog_state.core import exceptions
from catalog_state.services.catalog_service import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """
    FastAPI dependency returning the application's catalog service.

    Raises:
        AppException: CATALOG_NOT_LOADED if the lifespan has not run
    """
    service = getattr(request.app.state, "catalog_service", None)
    if service is None:
        raise exceptions.catalog_not_loaded()
    return service
