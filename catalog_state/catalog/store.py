"""
==============================================================================
Product Store Module
==============================================================================

In-memory record store for catalog products.

Features:
---------
- Insertion-ordered product list (pagination depends on this order)
- Id assignment as max(existing ids) + 1, or 1 when empty
- Partial-merge updates that never touch the id
- Idempotent removal

The store does not validate form input; callers run the form validator
first and hand over ProductData.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .models import Product, ProductData


# Module logger
logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Laptop", "price": 999.99, "category": "Electronics",
     "stock": 15, "description": "High-performance laptop with 16GB RAM"},
    {"id": 2, "name": "T-Shirt", "price": 29.99, "category": "Clothing",
     "stock": 50, "description": "Cotton t-shirt, comfortable fit"},
    {"id": 3, "name": "Coffee", "price": 12.99, "category": "Food",
     "stock": 100, "description": "Premium coffee beans"},
    {"id": 4, "name": "Book", "price": 19.99, "category": "Books",
     "stock": 25, "description": "Best-selling novel"},
    {"id": 5, "name": "Table Lamp", "price": 45.99, "category": "Home",
     "stock": 30, "description": "Modern LED table lamp"},
    {"id": 6, "name": "Running Shoes", "price": 89.99, "category": "Sports",
     "stock": 40, "description": "Comfortable running shoes"},
]


class ProductStore:
    """
    Mutable, insertion-ordered collection of products.

    Attributes:
        _products: Products in insertion order

    Example:
        >>> store = ProductStore()
        >>> laptop = store.add(ProductData(name="Laptop", price=999.99, category="Electronics"))
        >>> laptop.id
        1
        >>> store.remove(1)
        True
        >>> store.remove(1)
        False
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        """
        Initialize the store.

        Args:
            products: Optional initial products (ids must be unique)
        """
        self._products: List[Product] = []

        for product in products or []:
            if product.id in self:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._products.append(product)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(p.id == product_id for p in self._products)

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_sample_data(self) -> None:
        """Replace the store contents with the sample products."""
        self._products = [Product(**item) for item in SAMPLE_PRODUCTS]
        logger.info(f"✅ Loaded {len(self._products)} sample products")

    def clear(self) -> None:
        """Remove every product."""
        self._products.clear()

    # =========================================================================
    # READ METHODS
    # =========================================================================

    def list(self) -> List[Product]:
        """Get all products in insertion order."""
        return self._products.copy()

    def get(self, product_id: int) -> Optional[Product]:
        """Find product by id."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def next_id(self) -> int:
        """Id the next added product will receive."""
        if not self._products:
            return 1
        return max(p.id for p in self._products) + 1

    # =========================================================================
    # WRITE METHODS
    # =========================================================================

    def add(self, data: ProductData) -> Product:
        """
        Store a new product under the next id.

        Args:
            data: Validated product payload

        Returns:
            The stored Product
        """
        product = Product(id=self.next_id(), **data.model_dump())
        self._products.append(product)

        logger.info(f"➕ Added product {product.id}: {product.name}")
        return product

    def update(
        self,
        product_id: int,
        partial_data: Union[ProductData, Mapping[str, Any]]
    ) -> Optional[Product]:
        """
        Merge fields over an existing product.

        Args:
            product_id: Id of the product to update
            partial_data: ProductData or a mapping of the fields to change

        Returns:
            Updated Product, or None if no product has that id
        """
        if isinstance(partial_data, ProductData):
            changes = partial_data.model_dump()
        else:
            changes = dict(partial_data)
        changes.pop("id", None)

        for index, product in enumerate(self._products):
            if product.id != product_id:
                continue

            merged = {**product.model_dump(), **changes, "id": product.id}
            updated = Product.model_validate(merged)
            self._products[index] = updated

            logger.info(f"✏️ Updated product {product_id}: {sorted(changes)}")
            return updated

        logger.warning(f"Update skipped, product not found: {product_id}")
        return None

    def remove(self, product_id: int) -> bool:
        """
        Remove a product if present.

        Returns:
            True if a product was removed
        """
        for index, product in enumerate(self._products):
            if product.id == product_id:
                del self._products[index]
                logger.info(f"🗑️ Removed product {product_id}: {product.name}")
                return True

        logger.debug(f"Remove ignored, product not found: {product_id}")
        return False
