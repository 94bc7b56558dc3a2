"""
==============================================================================
Catalog State Endpoints
==============================================================================

Typed commands over the catalog state: search, paging, view mode, edit
session, and form submission. Each endpoint maps to exactly one
CatalogService call.

==============================================================================
"""

from fastapi import APIRouter, Depends

from catalog_state.catalog.models import ProductForm, ViewMode
from catalog_state.core import exceptions
from catalog_state.core.dependencies import get_catalog_service
from catalog_state.schemas.catalog import (
    CatalogViewResponse,
    EditStateResponse,
    PageRequest,
    PageResponse,
    ProductResponse,
    SearchRequest,
    SearchResponse,
    SubmitResponse,
    ViewModeRequest,
)
from catalog_state.services.catalog_service import CatalogService


router = APIRouter(prefix="/catalog", tags=["Catalog"])


class CatalogController:
    """Controller for catalog state operations."""

    def __init__(self, catalog: CatalogService):
        self._catalog = catalog

    def get_view(self) -> CatalogViewResponse:
        return CatalogViewResponse.from_view(self._catalog.get_view())

    def search(self, data: SearchRequest) -> SearchResponse:
        """Feed search input; optionally commit immediately."""
        self._catalog.set_search_text(data.text)
        if data.immediate:
            self._catalog.flush_search()

        return SearchResponse(
            pending=self._catalog.pending_search,
            view=self.get_view()
        )

    def go_to_page(self, data: PageRequest) -> PageResponse:
        changed = self._catalog.go_to_page(data.page)
        return PageResponse(changed=changed, view=self.get_view())

    def set_view_mode(self, data: ViewModeRequest) -> CatalogViewResponse:
        try:
            view = self._catalog.set_view_mode(data.mode.lower().strip())
        except ValueError:
            raise exceptions.invalid_view_mode(
                data.mode, [mode.value for mode in ViewMode]
            )
        return CatalogViewResponse.from_view(view)

    def get_edit_state(self) -> EditStateResponse:
        state = self._catalog.edit_state
        form = None
        if state.product_id is not None:
            product = self._catalog.get_product(state.product_id)
            if product is not None:
                form = ProductForm.from_product(product)
        return EditStateResponse.from_state(state, form)

    def begin_edit(self, product_id: int) -> EditStateResponse:
        form = self._catalog.begin_edit(product_id)
        if form is None:
            raise exceptions.product_not_found(product_id)
        return EditStateResponse.from_state(self._catalog.edit_state, form)

    def cancel_edit(self) -> EditStateResponse:
        self._catalog.cancel_edit()
        return EditStateResponse.from_state(self._catalog.edit_state)

    def submit(self, form: ProductForm) -> SubmitResponse:
        """Create or update a product from raw form input."""
        target = self._catalog.edit_state.product_id
        result = self._catalog.submit_form(form)

        if result.errors:
            raise exceptions.validation_failed(result.errors)
        if result.not_found:
            raise exceptions.product_not_found(target)

        return SubmitResponse(
            mode=result.mode,
            product=ProductResponse.from_product(result.product),
            view=self.get_view()
        )


@router.get("", response_model=CatalogViewResponse)
async def get_catalog_view(catalog: CatalogService = Depends(get_catalog_service)):
    """Get the current filtered, paginated view."""
    return CatalogController(catalog).get_view()


@router.post("/search", response_model=SearchResponse)
async def search_catalog(
    data: SearchRequest,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Submit search input (debounced unless ``immediate``)."""
    return CatalogController(catalog).search(data)


@router.post("/page", response_model=PageResponse)
async def go_to_page(
    data: PageRequest,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Navigate to a page; out-of-range pages leave the view unchanged."""
    return CatalogController(catalog).go_to_page(data)


@router.post("/view-mode", response_model=CatalogViewResponse)
async def set_view_mode(
    data: ViewModeRequest,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Switch between list and card presentation."""
    return CatalogController(catalog).set_view_mode(data)


@router.get("/edit", response_model=EditStateResponse)
async def get_edit_state(catalog: CatalogService = Depends(get_catalog_service)):
    """Get the edit session state."""
    return CatalogController(catalog).get_edit_state()


@router.post("/edit/{product_id}", response_model=EditStateResponse)
async def begin_edit(
    product_id: int,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Start editing a product and return its pre-populated form."""
    return CatalogController(catalog).begin_edit(product_id)


@router.delete("/edit", response_model=EditStateResponse)
async def cancel_edit(catalog: CatalogService = Depends(get_catalog_service)):
    """Leave edit mode."""
    return CatalogController(catalog).cancel_edit()


@router.post("/submit", response_model=SubmitResponse)
async def submit_form(
    form: ProductForm,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """Validate a product form and create or update the product."""
    return CatalogController(catalog).submit(form)
