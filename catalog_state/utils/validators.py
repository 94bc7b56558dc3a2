"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation of raw product form input.

This module implements:
- ProductFormValidator: Field-by-field validation and parsing of ProductForm

Validation Rules:
----------------
- name: required, non-blank after trimming
- price: required, a finite decimal number in ASCII digits, zero or greater
- category: required
- stock: optional (blank means 0), otherwise an ASCII integer, zero or greater

Every rule runs; one failing field never hides errors on another.

==============================================================================
"""

from __future__ import annotations

import math
import re
from typing import Dict, Optional

from catalog_state.catalog.models import ProductData, ProductForm


ValidationResult = Dict[str, str]


NAME_REQUIRED = "Product name is required"
PRICE_REQUIRED = "Price is required"
PRICE_INVALID = "Price must be a valid positive number"
CATEGORY_REQUIRED = "Category is required"
STOCK_INVALID = "Stock must be a valid non-negative number"


# Plain ASCII notation only: no digit separators, no non-Latin digits
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_float(value: str) -> Optional[float]:
    text = value.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def _parse_int(value: str) -> Optional[int]:
    text = value.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


class ProductFormValidator:
    """
    Validator for product create/update forms.

    Example:
        >>> validator = ProductFormValidator()
        >>> validator.validate(ProductForm(name="", price="10", category="Books"))
        {'name': 'Product name is required'}
        >>> validator.parse(ProductForm(name=" Pen ", price="2.5", category="Office"))
        ProductData(name='Pen', price=2.5, category='Office', stock=0, description='')
    """

    def validate(self, form: ProductForm) -> ValidationResult:
        """
        Validate every field of a product form.

        Args:
            form: Raw form input

        Returns:
            Mapping of field name to error message; empty when valid
        """
        checks = (
            ("name", self.validate_name(form.name)),
            ("price", self.validate_price(form.price)),
            ("category", self.validate_category(form.category)),
            ("stock", self.validate_stock(form.stock)),
        )
        return {field: error for field, error in checks if error is not None}

    def is_valid(self, form: ProductForm) -> bool:
        """Quick validation check."""
        return not self.validate(form)

    # =========================================================================
    # FIELD RULES
    # =========================================================================

    def validate_name(self, name: str) -> Optional[str]:
        if not name or not name.strip():
            return NAME_REQUIRED
        return None

    def validate_price(self, price: str) -> Optional[str]:
        if not price or not price.strip():
            return PRICE_REQUIRED

        number = _parse_float(price)
        if number is None or number < 0:
            return PRICE_INVALID

        return None

    def validate_category(self, category: str) -> Optional[str]:
        if not category or not category.strip():
            return CATEGORY_REQUIRED
        return None

    def validate_stock(self, stock: str) -> Optional[str]:
        # Blank stock is allowed and defaults to 0
        if not stock or not stock.strip():
            return None

        number = _parse_int(stock)
        if number is None or number < 0:
            return STOCK_INVALID

        return None

    # =========================================================================
    # PARSING
    # =========================================================================

    def parse(self, form: ProductForm) -> ProductData:
        """
        Convert a validated form into a product payload.

        Raises:
            ValueError: If the form does not pass validation
        """
        errors = self.validate(form)
        if errors:
            raise ValueError(f"Cannot parse invalid product form: {errors}")

        stock = form.stock.strip()
        return ProductData(
            name=form.name.strip(),
            price=_parse_float(form.price),
            category=form.category.strip(),
            stock=_parse_int(stock) if stock else 0,
            description=form.description.strip(),
        )
