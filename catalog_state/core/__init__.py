"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the HTTP shell.

This package provides:
- Custom exception handling with consistent error responses
- Exception factory functions for common error scenarios
- FastAPI dependencies for reaching the per-app catalog service

Usage:
------
    from catalog_state.core import AppException, get_catalog_service

    from catalog_state.core import exceptions
    raise exceptions.product_not_found(42)

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import get_catalog_service

__all__ = [
    "AppException",
    "register_exception_handlers",
    "get_catalog_service",
]
