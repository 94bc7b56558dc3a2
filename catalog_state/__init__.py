"""
==============================================================================
Product Catalog State Engine
==============================================================================

In-memory product catalog with debounced name search, pagination, form
validation, and an edit session. A FastAPI shell in ``catalog_state.main``
exposes one catalog per application instance.

==============================================================================
"""

__version__ = "1.0.0"
