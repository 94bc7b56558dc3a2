"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the catalog.

Modules:
--------
- validators: Product form validation

==============================================================================
"""

from .validators import ProductFormValidator, ValidationResult

__all__ = [
    "ProductFormValidator",
    "ValidationResult",
]
