"""
==============================================================================
Product Record Endpoints
==============================================================================

Endpoints for reading and deleting individual catalog products.

==============================================================================
"""

from fastapi import APIRouter, Depends

from catalog_state.core import exceptions
from catalog_state.core.dependencies import get_catalog_service
from catalog_state.schemas.catalog import (
    CatalogViewResponse,
    DeleteResponse,
    ProductResponse,
)
from catalog_state.services.catalog_service import CatalogService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product record operations."""

    def __init__(self, catalog: CatalogService):
        self._catalog = catalog

    def get_product(self, product_id: int) -> dict:
        """Get product by id."""
        product = self._catalog.get_product(product_id)

        if not product:
            raise exceptions.product_not_found(product_id)

        return {
            "success": True,
            "product": ProductResponse.from_product(product)
        }

    def delete_product(self, product_id: int) -> DeleteResponse:
        """Delete product by id (idempotent)."""
        deleted = self._catalog.delete_product(product_id)
        return DeleteResponse(
            deleted=deleted,
            view=CatalogViewResponse.from_view(self._catalog.get_view())
        )


@router.get("/{product_id}")
async def get_product(
    product_id: int,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Get a single product."""
    return ProductController(catalog).get_product(product_id)


@router.delete("/{product_id}", response_model=DeleteResponse)
async def delete_product(
    product_id: int,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Delete a product; a missing product reports ``deleted: false``."""
    return ProductController(catalog).delete_product(product_id)
