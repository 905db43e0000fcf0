# debounce.py - a single cancellable deferred call on the running event loop
import asyncio
from typing import Any, Callable, Optional


class Debouncer:
    """Runs a callback once input has been quiet for ``delay`` seconds.

    Scheduling again before the delay elapses cancels the pending call and
    starts the wait over, so only the last request within a burst runs.
    """

    def __init__(self, delay: float, loop: Optional[asyncio.AbstractEventLoop] = None):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, callback: Callable[..., Any], *args: Any) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, callback, args)

    def cancel(self) -> bool:
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def _fire(self, callback: Callable[..., Any], args: tuple) -> None:
        self._handle = None
        callback(*args)
