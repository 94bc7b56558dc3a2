"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas for the HTTP shell.

==============================================================================
"""

from .catalog import (
    CatalogViewResponse,
    DeleteResponse,
    EditStateResponse,
    PageRequest,
    PageResponse,
    ProductResponse,
    SearchRequest,
    SearchResponse,
    SubmitResponse,
    ViewModeRequest,
)

__all__ = [
    # Requests
    "PageRequest",
    "SearchRequest",
    "ViewModeRequest",
    # Responses
    "CatalogViewResponse",
    "DeleteResponse",
    "EditStateResponse",
    "PageResponse",
    "ProductResponse",
    "SearchResponse",
    "SubmitResponse",
]
