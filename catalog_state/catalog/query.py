"""
==============================================================================
Catalog Query Module
==============================================================================

Pure derivation of filtered, paginated views over a product sequence.

Matching Rules:
--------------
- Empty search text passes every product through unchanged
- Otherwise a product matches when its case-folded name contains the
  normalized search text as a substring
- Only the query side is trimmed; product names are matched as stored

Pagination:
----------
Pages are 1-indexed. A page outside 1..total_pages yields an empty item
list while total and total_pages stay accurate.

==============================================================================
"""

from __future__ import annotations

from typing import List, Sequence

from .models import Product, QueryResult


DEFAULT_PAGE_SIZE = 6


def normalize_search_text(raw: str) -> str:
    """Trim and case-fold raw search input."""
    return (raw or "").strip().casefold()


def count_pages(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items (0 when empty)."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return (total + page_size - 1) // page_size if total > 0 else 0


def filter_products(products: Sequence[Product], search_text: str) -> List[Product]:
    """
    Filter products by name substring.

    Args:
        products: Products in store order
        search_text: Search text (normalized here as well)

    Returns:
        Matching products, order preserved
    """
    needle = normalize_search_text(search_text)
    if not needle:
        return list(products)

    return [p for p in products if needle in p.name.casefold()]


def query_products(
    products: Sequence[Product],
    search_text: str,
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE
) -> QueryResult:
    """
    Derive one page of the filtered product list.

    Args:
        products: Products in store (insertion) order
        search_text: Committed search text
        page: 1-indexed page number, not clamped
        page_size: Items per page

    Returns:
        QueryResult with the page items and totals
    """
    filtered = filter_products(products, search_text)
    total = len(filtered)
    total_pages = count_pages(total, page_size)

    # Negative slice bounds would wrap around in Python
    if page < 1:
        items: List[Product] = []
    else:
        start = (page - 1) * page_size
        items = filtered[start:start + page_size]

    return QueryResult(items=items, total=total, total_pages=total_pages)
