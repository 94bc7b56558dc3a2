"""
==============================================================================
Search Debouncer Module
==============================================================================

Coalesces rapid search input into a single delayed commit.

Behaviour:
---------
- Every input is normalized (trimmed, case-folded) and replaces the
  pending value
- Every input cancels the pending commit and schedules a new one after
  the quiet period
- At most one commit is pending at a time
- Only the commit reaches the catalog; keystrokes in between do not

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from catalog_state.catalog.query import normalize_search_text

from .scheduler import Scheduler, TimerHandle


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_DEBOUNCE_SECONDS = 0.5


class SearchDebouncer:
    """
    Delays search commits until input has been quiet for ``delay`` seconds.

    Attributes:
        _on_commit: Callback receiving the committed, normalized text
        _scheduler: Scheduler providing cancellable deferred callbacks
        _delay: Quiet period in seconds
        _handle: Handle of the pending commit, if any
        _pending: Value the pending commit will deliver

    Example:
        >>> debouncer = SearchDebouncer(catalog.commit_search, scheduler)
        >>> debouncer.on_input("  Lap")
        >>> debouncer.pending
        'lap'
    """

    def __init__(
        self,
        on_commit: Callable[[str], None],
        scheduler: Scheduler,
        delay: float = DEFAULT_DEBOUNCE_SECONDS
    ) -> None:
        if delay < 0:
            raise ValueError(f"Debounce delay cannot be negative: {delay}")

        self._on_commit = on_commit
        self._scheduler = scheduler
        self._delay = delay
        self._handle: Optional[TimerHandle] = None
        self._pending: Optional[str] = None

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> Optional[str]:
        """Normalized text awaiting commit, or None."""
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._handle is not None

    # =========================================================================
    # INPUT HANDLING
    # =========================================================================

    def on_input(self, raw_text: str) -> None:
        """
        Record a keystroke-equivalent input and (re)start the quiet period.

        Args:
            raw_text: Search box contents as typed
        """
        self.cancel()

        self._pending = normalize_search_text(raw_text)
        self._handle = self._scheduler.call_later(self._delay, self._commit)

        logger.debug(f"Search commit scheduled in {self._delay}s: {self._pending!r}")

    def cancel(self) -> bool:
        """
        Drop the pending commit, if any.

        Returns:
            True if a commit was pending
        """
        if self._handle is None:
            return False

        self._handle.cancel()
        self._handle = None
        self._pending = None

        logger.debug("Pending search commit cancelled")
        return True

    def flush(self) -> bool:
        """
        Commit the pending value now instead of waiting.

        Returns:
            True if a commit was delivered
        """
        if self._handle is None:
            return False

        self._handle.cancel()
        self._commit()
        return True

    def _commit(self) -> None:
        value = self._pending or ""
        self._handle = None
        self._pending = None

        logger.debug(f"Search committed: {value!r}")
        self._on_commit(value)
