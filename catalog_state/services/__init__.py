"""
==============================================================================
Services Package
==============================================================================

Stateful catalog services built on the catalog package.

Modules:
--------
- scheduler: Cancellable deferred callbacks (asyncio-backed)
- search_debouncer: Search input coalescing
- edit_session: Edit target tracking and form submission
- catalog_service: Per-instance catalog façade

==============================================================================
"""

from .scheduler import AsyncioScheduler, Scheduler, TimerHandle
from .search_debouncer import SearchDebouncer
from .edit_session import EditSession, SubmitResult
from .catalog_service import CatalogService, create_catalog_service

__all__ = [
    "AsyncioScheduler",
    "Scheduler",
    "TimerHandle",
    "SearchDebouncer",
    "EditSession",
    "SubmitResult",
    "CatalogService",
    "create_catalog_service",
]
