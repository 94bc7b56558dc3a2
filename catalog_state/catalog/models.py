"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog records, raw form input, and derived views.

==============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ViewMode(str, Enum):
    """Presentation mode tracked for the UI shell (not interpreted)."""
    LIST = "list"
    CARD = "card"


class ProductData(BaseModel):
    """
    Validated product payload without an id.

    Produced by the form validator and consumed by the record store.
    """

    name: str = Field(..., min_length=1, description="Product name")
    price: float = Field(..., ge=0, description="Unit price")
    category: str = Field(..., min_length=1, description="Category label")
    stock: int = Field(default=0, ge=0, description="Units in stock")
    description: str = Field(default="", description="Free-text description")


class Product(ProductData):
    """
    Product record held by the catalog store.

    Attributes:
        id: Store-assigned identifier, unique and immutable
        name: Product display name
        price: Non-negative unit price
        category: Category label (set membership is not enforced)
        stock: Non-negative stock count
        description: Optional description text
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")


class ProductForm(BaseModel):
    """
    Raw product form input, exactly as captured from the UI.

    Every field is a string; empty string means the field was left blank.
    """

    name: str = ""
    price: str = ""
    category: str = ""
    stock: str = ""
    description: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductForm":
        """Build a form pre-populated with a product's current values."""
        price = product.price
        return cls(
            name=product.name,
            price=str(int(price)) if price.is_integer() else repr(price),
            category=product.category,
            stock=str(product.stock),
            description=product.description or "",
        )


class QueryResult(BaseModel):
    """Filtered + paginated slice returned by the query engine."""

    items: List[Product] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    total_pages: int = Field(default=0, ge=0)


class EditState(BaseModel):
    """Snapshot of the edit session for driving form chrome."""

    mode: str = Field(default="create", description="'create' or 'edit'")
    product_id: Optional[int] = None


class CatalogView(BaseModel):
    """
    Derived view object handed to the presentation layer.

    Produced after every operation on a CatalogService.
    """

    items: List[Product] = Field(default_factory=list)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    search_text: str = ""
    view_mode: ViewMode = ViewMode.LIST
    editing_id: Optional[int] = None

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def start_item(self) -> int:
        """1-based position of the first item shown, 0 when empty."""
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def end_item(self) -> int:
        """1-based position of the last item shown, 0 when empty."""
        if not self.items:
            return 0
        return min(self.current_page * self.page_size, self.total)

    @property
    def page_numbers(self) -> List[Optional[int]]:
        """
        Page buttons to show: first, last, and the current page +/- 1.

        A None entry marks an ellipsis standing in for skipped pages.

        Example:
            >>> view.current_page, view.total_pages
            (5, 9)
            >>> view.page_numbers
            [1, None, 4, 5, 6, None, 9]
        """
        numbers: List[Optional[int]] = []
        for page in range(1, self.total_pages + 1):
            if page in (1, self.total_pages) or abs(page - self.current_page) <= 1:
                numbers.append(page)
            elif abs(page - self.current_page) == 2:
                numbers.append(None)
        return numbers

    @property
    def is_filtered(self) -> bool:
        """True when a committed search is narrowing the catalog."""
        return bool(self.search_text)
