"""
==============================================================================
Catalog Package - Product Records and Queries
==============================================================================

In-memory product store with name search and pagination.

Classes:
--------
- Product / ProductData / ProductForm: Pydantic models for records and input
- ProductStore: Insertion-ordered record store with id assignment
- CatalogView: Derived view handed to the presentation layer

==============================================================================
"""

from .models import (
    CatalogView,
    EditState,
    Product,
    ProductData,
    ProductForm,
    QueryResult,
    ViewMode,
)
from .query import (
    DEFAULT_PAGE_SIZE,
    count_pages,
    filter_products,
    normalize_search_text,
    query_products,
)
from .store import SAMPLE_PRODUCTS, ProductStore

__all__ = [
    "CatalogView",
    "EditState",
    "Product",
    "ProductData",
    "ProductForm",
    "QueryResult",
    "ViewMode",
    "DEFAULT_PAGE_SIZE",
    "count_pages",
    "filter_products",
    "normalize_search_text",
    "query_products",
    "SAMPLE_PRODUCTS",
    "ProductStore",
]
