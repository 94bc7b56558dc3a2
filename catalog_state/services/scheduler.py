"""
==============================================================================
Deferred Callback Scheduling
==============================================================================

Minimal timer abstraction used by the search debouncer.

The catalog runs on a single cooperative thread. A scheduled callback is
a deferred task on that thread, never a worker thread. The default
implementation places callbacks on the running asyncio event loop.

==============================================================================
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay (in seconds)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    The loop is captured at construction. Without an explicit loop the
    scheduler must be built from inside a running loop.

    Example:
        >>> scheduler = AsyncioScheduler(asyncio.get_running_loop())
        >>> handle = scheduler.call_later(0.5, commit)
        >>> handle.cancel()

    Raises:
        ValueError: If no loop is given and none is running
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                raise ValueError(
                    "AsyncioScheduler needs an event loop: pass one explicitly "
                    "or build the scheduler inside a running loop"
                ) from None
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def call_later(
        self,
        delay: float,
        callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        return self._loop.call_later(delay, callback)
