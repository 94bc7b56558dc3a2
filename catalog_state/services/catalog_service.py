"""
==============================================================================
Catalog Service Module
==============================================================================

Per-instance façade over the catalog: store, query state, search
debouncing, edit session, and view mode.

This module implements:
- CatalogService: Inbound operations called by the UI adaptation layer
- create_catalog_service: Factory building a service from Settings

Query State Rules:
-----------------
- A search commit always resets the page to 1
- go_to_page() applies only targets within 1..total_pages, otherwise it
  is a no-op
- After every mutation the page is reset to 1 if it no longer exists

Every state change is pushed to subscribed listeners as a CatalogView,
including debounce commits that happen between inbound calls.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from catalog_state.catalog.models import (
    CatalogView,
    EditState,
    Product,
    ProductForm,
    QueryResult,
    ViewMode,
)
from catalog_state.catalog.query import DEFAULT_PAGE_SIZE, query_products
from catalog_state.catalog.store import ProductStore
from catalog_state.config import Settings, get_settings
from catalog_state.utils.validators import ProductFormValidator

from .edit_session import EditSession, SubmitResult
from .scheduler import AsyncioScheduler, Scheduler
from .search_debouncer import DEFAULT_DEBOUNCE_SECONDS, SearchDebouncer


# Module logger
logger = logging.getLogger(__name__)


ViewListener = Callable[[CatalogView], None]


class CatalogService:
    """
    Catalog state engine for one UI shell.

    Attributes:
        _store: Product record store
        _page_size: Items per derived page
        _search_text: Committed, normalized search text
        _page: Current 1-indexed page
        _view_mode: Presentation mode tracked for the shell
        _edit: Edit session bound to the store
        _debouncer: Search input debouncer
        _listeners: Callbacks receiving the view after each change

    Example:
        >>> catalog = CatalogService(store, scheduler=scheduler)
        >>> catalog.set_search_text("shirt")
        >>> catalog.flush_search()
        >>> [p.name for p in catalog.get_view().items]
        ['T-Shirt']
    """

    def __init__(
        self,
        store: Optional[ProductStore] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        view_mode: ViewMode = ViewMode.LIST,
        validator: Optional[ProductFormValidator] = None
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        self._store = store if store is not None else ProductStore()
        self._page_size = page_size
        self._search_text = ""
        self._page = 1
        self._view_mode = ViewMode(view_mode)
        self._edit = EditSession(self._store, validator)
        # Default binds to the running event loop, ValueError if there is none
        self._debouncer = SearchDebouncer(
            self._commit_search,
            scheduler if scheduler is not None else AsyncioScheduler(),
            debounce_seconds,
        )
        self._listeners: List[ViewListener] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def store(self) -> ProductStore:
        return self._store

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def search_text(self) -> str:
        """Committed search text (pending input is not included)."""
        return self._search_text

    @property
    def pending_search(self) -> Optional[str]:
        return self._debouncer.pending

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def edit_state(self) -> EditState:
        return self._edit.state()

    # =========================================================================
    # LISTENERS
    # =========================================================================

    def subscribe(self, listener: ViewListener) -> None:
        """Register a callback receiving the view after every change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> CatalogView:
        view = self.get_view()
        for listener in list(self._listeners):
            listener(view)
        return view

    # =========================================================================
    # VIEW DERIVATION
    # =========================================================================

    def _query(self) -> QueryResult:
        return query_products(
            self._store.list(),
            self._search_text,
            self._page,
            self._page_size,
        )

    def get_view(self) -> CatalogView:
        """Derive the current filtered, paginated view."""
        result = self._query()
        return CatalogView(
            items=result.items,
            total=result.total,
            total_pages=result.total_pages,
            current_page=self._page,
            page_size=self._page_size,
            search_text=self._search_text,
            view_mode=self._view_mode,
            editing_id=self._edit.product_id,
        )

    def get_product(self, product_id: int) -> Optional[Product]:
        return self._store.get(product_id)

    def close(self) -> None:
        """Drop any pending search commit and all listeners."""
        self._debouncer.cancel()
        self._listeners.clear()

    def _reclamp_page(self) -> None:
        total_pages = self._query().total_pages
        if self._page > max(total_pages, 1):
            logger.debug(f"Page {self._page} no longer exists, back to page 1")
            self._page = 1

    # =========================================================================
    # SEARCH
    # =========================================================================

    def set_search_text(self, raw: str) -> CatalogView:
        """
        Feed search box input through the debouncer.

        The view returned still reflects the previous committed search.
        """
        self._debouncer.on_input(raw)
        return self.get_view()

    def flush_search(self) -> CatalogView:
        """Commit any pending search input immediately."""
        self._debouncer.flush()
        return self.get_view()

    def _commit_search(self, text: str) -> None:
        self._search_text = text
        self._page = 1
        logger.info(f"🔍 Search committed: {text!r}")
        self._notify()

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def go_to_page(self, target: int) -> bool:
        """
        Move to another page of the current filter.

        Returns:
            True if the page changed; out-of-range targets are ignored
        """
        total_pages = self._query().total_pages

        if not 1 <= target <= total_pages:
            logger.debug(f"Ignoring page {target}, valid range is 1..{total_pages}")
            return False

        self._page = target
        self._notify()
        return True

    def set_view_mode(self, mode: Union[ViewMode, str]) -> CatalogView:
        """
        Switch presentation mode.

        Raises:
            ValueError: If mode is not a ViewMode value
        """
        self._view_mode = ViewMode(mode)
        return self._notify()

    # =========================================================================
    # EDITING
    # =========================================================================

    def begin_edit(self, product_id: int) -> Optional[ProductForm]:
        """
        Bind the form to a product.

        Returns:
            Form pre-populated with the product, or None if it does not exist
            (the session is left unchanged)
        """
        product = self._store.get(product_id)
        if product is None:
            logger.warning(f"Cannot edit missing product: {product_id}")
            return None

        self._edit.begin(product_id)
        self._notify()
        return ProductForm.from_product(product)

    def cancel_edit(self) -> CatalogView:
        """Leave edit mode; the form goes back to creating products."""
        self._edit.cancel()
        return self._notify()

    def submit_form(self, form: ProductForm) -> SubmitResult:
        """
        Validate a form and create or update a product.

        Rejected forms change nothing. Accepted forms leave the session idle.
        """
        result = self._edit.submit(form)

        if result.errors:
            return result

        self._reclamp_page()
        self._notify()
        return result

    def delete_product(self, product_id: int) -> bool:
        """
        Delete a product; deleting a missing id is a no-op.

        Returns:
            True if a product was removed
        """
        removed = self._store.remove(product_id)
        forgotten = self._edit.forget(product_id)

        if forgotten:
            logger.info(f"Edit session cleared, product {product_id} deleted")

        if removed:
            self._reclamp_page()
        if removed or forgotten:
            self._notify()

        return removed


# =============================================================================
# FACTORY
# =============================================================================

def create_catalog_service(
    settings: Optional[Settings] = None,
    scheduler: Optional[Scheduler] = None
) -> CatalogService:
    """
    Build a catalog service from configuration.

    Args:
        settings: Settings to use (global settings if None)
        scheduler: Scheduler for search commits (running event loop if None)

    Raises:
        ValueError: If no scheduler is given and no event loop is running

    Returns:
        New, independent CatalogService
    """
    settings = settings or get_settings()

    store = ProductStore()
    if settings.load_sample_data:
        store.load_sample_data()

    return CatalogService(
        store,
        scheduler=scheduler,
        page_size=settings.page_size,
        debounce_seconds=settings.search_debounce_seconds,
        view_mode=settings.view_mode,
    )
