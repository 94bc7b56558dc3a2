"""
==============================================================================
Edit Session Module
==============================================================================

Tracks the product bound to the edit form and applies form submissions.

States:
------
- Idle: the form creates new products
- Editing(product_id): the form updates that product

Submitting:
----------
1. The form is validated; on errors nothing is mutated and the session
   stays as it was
2. Idle -> store.add(), Editing(id) -> store.update(id)
3. The session returns to Idle after every accepted submission

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from pydantic import BaseModel, Field

from catalog_state.catalog.models import EditState, Product, ProductForm
from catalog_state.catalog.store import ProductStore
from catalog_state.utils.validators import ProductFormValidator


# Module logger
logger = logging.getLogger(__name__)


CREATE_MODE = "create"
EDIT_MODE = "edit"


class SubmitResult(BaseModel):
    """Outcome of a form submission."""

    mode: str = Field(description="'create' or 'edit' at submit time")
    errors: Dict[str, str] = Field(default_factory=dict)
    product: Optional[Product] = None
    not_found: bool = False

    @property
    def success(self) -> bool:
        return self.product is not None


class EditSession:
    """
    Edit target tracker mediating between the validator and the store.

    Attributes:
        _store: Record store receiving accepted submissions
        _validator: Form validator
        _product_id: Current edit target, None when idle

    Example:
        >>> session = EditSession(store)
        >>> session.begin(3)
        >>> session.mode
        'edit'
        >>> session.submit(form).success
        True
        >>> session.mode
        'create'
    """

    def __init__(
        self,
        store: ProductStore,
        validator: Optional[ProductFormValidator] = None
    ) -> None:
        self._store = store
        self._validator = validator or ProductFormValidator()
        self._product_id: Optional[int] = None

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def product_id(self) -> Optional[int]:
        """Current edit target, or None when idle."""
        return self._product_id

    @property
    def is_editing(self) -> bool:
        return self._product_id is not None

    @property
    def mode(self) -> str:
        return EDIT_MODE if self.is_editing else CREATE_MODE

    def state(self) -> EditState:
        return EditState(mode=self.mode, product_id=self._product_id)

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def begin(self, product_id: int) -> None:
        """Bind the form to a product, replacing any previous target."""
        if self._product_id is not None and self._product_id != product_id:
            logger.debug(f"Edit target replaced: {self._product_id} -> {product_id}")
        self._product_id = product_id

    def cancel(self) -> None:
        """Return to Idle (form back in create mode)."""
        self._product_id = None

    clear = cancel

    def forget(self, product_id: int) -> bool:
        """
        Drop the edit target if it is ``product_id``.

        Returns:
            True if the session was cleared
        """
        if self._product_id == product_id:
            self._product_id = None
            return True
        return False

    # =========================================================================
    # SUBMISSION
    # =========================================================================

    def submit(self, form: ProductForm) -> SubmitResult:
        """
        Validate a form and create or update a product.

        Args:
            form: Raw form input

        Returns:
            SubmitResult with either errors or the stored product
        """
        mode = self.mode
        errors = self._validator.validate(form)

        if errors:
            logger.info(f"Product form rejected ({mode}): {sorted(errors)}")
            return SubmitResult(mode=mode, errors=errors)

        data = self._validator.parse(form)

        if self._product_id is None:
            product = self._store.add(data)
            return SubmitResult(mode=mode, product=product)

        target = self._product_id
        product = self._store.update(target, data)
        self.clear()

        if product is None:
            logger.warning(f"Edit target no longer exists: {target}")
            return SubmitResult(mode=mode, not_found=True)

        return SubmitResult(mode=mode, product=product)
