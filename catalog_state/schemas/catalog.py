"""
==============================================================================
Catalog Schemas Module
==============================================================================

Request and response schemas for the catalog endpoints.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from catalog_state.catalog.models import CatalogView, EditState, Product, ProductForm


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class SearchRequest(BaseModel):
    """Search box input."""
    text: str = Field(default="", max_length=200)
    immediate: bool = Field(
        default=False,
        description="Commit now instead of waiting for the quiet period"
    )


class PageRequest(BaseModel):
    """Requested page number (out-of-range pages are ignored)."""
    page: int


class ViewModeRequest(BaseModel):
    """Requested presentation mode."""
    mode: str


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class ProductResponse(BaseModel):
    """Product response schema."""

    id: int
    name: str
    price: float
    category: str
    stock: int
    description: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(**product.model_dump())


class CatalogViewResponse(BaseModel):
    """Derived catalog view with pagination helpers."""

    success: bool = Field(default=True)
    items: List[ProductResponse]
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    search_text: str
    view_mode: str
    editing_id: Optional[int] = None
    has_previous: bool
    has_next: bool
    start_item: int
    end_item: int
    page_numbers: List[Optional[int]]
    is_filtered: bool

    @classmethod
    def from_view(cls, view: CatalogView) -> "CatalogViewResponse":
        """Create response from a CatalogView."""
        return cls(
            items=[ProductResponse.from_product(p) for p in view.items],
            total=view.total,
            total_pages=view.total_pages,
            current_page=view.current_page,
            page_size=view.page_size,
            search_text=view.search_text,
            view_mode=view.view_mode.value,
            editing_id=view.editing_id,
            has_previous=view.has_previous,
            has_next=view.has_next,
            start_item=view.start_item,
            end_item=view.end_item,
            page_numbers=view.page_numbers,
            is_filtered=view.is_filtered,
        )


class SearchResponse(BaseModel):
    """Search input acknowledgement."""
    success: bool = Field(default=True)
    pending: Optional[str] = None
    view: CatalogViewResponse


class PageResponse(BaseModel):
    """Page navigation result."""
    success: bool = Field(default=True)
    changed: bool
    view: CatalogViewResponse


class EditStateResponse(BaseModel):
    """Edit session state with the pre-populated form when editing."""
    success: bool = Field(default=True)
    mode: str
    product_id: Optional[int] = None
    form: Optional[ProductForm] = None

    @classmethod
    def from_state(
        cls,
        state: EditState,
        form: Optional[ProductForm] = None
    ) -> "EditStateResponse":
        return cls(mode=state.mode, product_id=state.product_id, form=form)


class SubmitResponse(BaseModel):
    """Accepted form submission."""
    success: bool = Field(default=True)
    mode: str
    product: ProductResponse
    view: CatalogViewResponse


class DeleteResponse(BaseModel):
    """Delete result; deleting a missing product is not an error."""
    success: bool = Field(default=True)
    deleted: bool
    view: CatalogViewResponse
