"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- catalog: Catalog state commands (search, paging, editing, submit)
- products: Product record lookup and deletion

==============================================================================
"""

from . import health, catalog, products

__all__ = ["health", "catalog", "products"]
