"""
Cancellable timed actions.

Works with any scheduler exposing ``call_later(delay, callback, *args)``
that returns a handle with ``cancel()``; an ``asyncio`` event loop is
the usual choice.
"""
from typing import Any, Callable, Optional, Protocol


# ============================================================================
# Scheduler Interface
# ============================================================================

class Handle(Protocol):
    """A scheduled callback that can be cancelled."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay."""

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> Handle:
        ...


# ============================================================================
# Delayed Action
# ============================================================================

class DelayedAction:
    """
    A single pending callback.

    Scheduling again before the callback fires cancels the pending one
    and restarts the delay, so at most one is outstanding.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handle: Optional[Handle] = None

    @property
    def pending(self) -> bool:
        """Whether a callback is waiting to fire."""
        return self._handle is not None

    def schedule(self, delay: float, callback: Callable[[], Any]) -> None:
        """Run ``callback`` after ``delay`` seconds, replacing any pending one."""
        self.cancel()
        self._handle = self._scheduler.call_later(delay, self._fire, callback)

    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], Any]) -> None:
        self._handle = None
        callback()


# ============================================================================
# Ticker
# ============================================================================

class Ticker:
    """Calls ``callback`` every ``interval`` seconds until stopped."""

    def __init__(
        self,
        scheduler: Scheduler,
        interval: float,
        callback: Callable[[], Any],
    ) -> None:
        self._scheduler = scheduler
        self._interval = interval
        self._callback = callback
        self._handle: Optional[Handle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Begin ticking; no-op if already running."""
        if self._handle is None:
            self._schedule_next()

    def stop(self) -> None:
        """Stop ticking; the pending tick never fires."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule_next(self) -> None:
        self._handle = self._scheduler.call_later(self._interval, self._tick)

    def _tick(self) -> None:
        self._schedule_next()
        self._callback()
