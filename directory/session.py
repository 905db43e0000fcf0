"""One browsing session over the advocate directory.

A session owns the search term and the debounce timer, and drives the
immutable ``SessionState`` through ``reduce``. It runs entirely on one asyncio
event loop; the only awaited work is the initial fetch, which runs in the
default executor because the HTTP client blocks.

Typical use::

    session = DirectorySession(lambda: fetch_advocates(url))
    session.subscribe(render)
    await session.start()
    session.set_term("bos")       # applied after the debounce interval
    session.search_field("MD")    # click on a degree cell
    state = await session.wait_settled()
    session.reset()               # immediate
    session.close()
"""

import asyncio
import logging
from typing import Callable, List, Optional, Sequence

from directory.config import DirectoryConfig
from directory.debounce import Debouncer
from directory.errors import DirectoryError, LoadError
from directory.models import Advocate
from directory.state import (
    LOAD_ERROR_MESSAGE,
    Event,
    Failed,
    FilterSettled,
    Loaded,
    Reset,
    SessionState,
    TermChanged,
    reduce,
)

logger = logging.getLogger(__name__)

Fetch = Callable[[], Sequence[Advocate]]
Listener = Callable[[SessionState], None]

ACTIVATION_KEYS = frozenset({"Enter", " ", "Space", "Spacebar"})


class DirectorySession:
    def __init__(self, fetch: Fetch, config: Optional[DirectoryConfig] = None):
        self.config = config or DirectoryConfig()
        self._fetch = fetch
        self._state = SessionState()
        self._debouncer = Debouncer(self.config.debounce_seconds)
        self._listeners: List[Listener] = []
        self._settled = asyncio.Event()
        self._started = False
        self._closed = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def filter_pending(self) -> bool:
        return self._debouncer.pending

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _dispatch(self, event: Event) -> None:
        previous = self._state
        self._state = reduce(previous, event)
        self._refresh_settled()
        if self._state is previous:
            return
        logger.debug("%s -> status=%s term=%r rows=%d", type(event).__name__,
                     self._state.status.value, self._state.term, len(self._state.filtered))
        for listener in list(self._listeners):
            listener(self._state)

    def _refresh_settled(self) -> None:
        # settled: loaded, nothing scheduled, and the view matches the term
        if self._closed or (not self._state.is_loading and not self._debouncer.pending
                            and self._state.is_settled):
            self._settled.set()
        else:
            self._settled.clear()

    async def start(self) -> SessionState:
        """Load the directory once. Loading ends in Ready or Error, never both."""
        if self._started:
            raise DirectoryError("session already started")
        self._started = True
        loop = asyncio.get_running_loop()
        try:
            advocates = await loop.run_in_executor(None, self._fetch)
        except LoadError as exc:
            logger.error("Failed to fetch advocates: %s", exc)
            self._dispatch(Failed(LOAD_ERROR_MESSAGE))
            return self._state
        except Exception:
            self._dispatch(Failed(LOAD_ERROR_MESSAGE))
            raise
        if not self._closed:
            self._dispatch(Loaded(tuple(advocates)))
        return self._state

    async def wait_settled(self) -> SessionState:
        """Wait until loading is over and no filter is pending, then return the state."""
        await self._settled.wait()
        return self._state

    def set_term(self, term: str) -> None:
        """Record typed input and schedule the filter for when typing pauses."""
        if self._closed:
            return
        self._debouncer.call(self._settle, term)
        self._dispatch(TermChanged(term))

    async def search(self, term: str) -> SessionState:
        """Set the term and return the state once it (or a later term) has settled."""
        self.set_term(term)
        return await self.wait_settled()

    def search_field(self, value) -> None:
        """Search for a displayed field's literal text (name, city, degree, tag, years)."""
        self.set_term(str(value))

    def activate(self, key: str, value) -> bool:
        """Keyboard activation on a field value; Enter and Space behave like a click."""
        if key not in ACTIVATION_KEYS:
            return False
        self.search_field(value)
        return True

    def reset(self) -> None:
        self._debouncer.cancel()
        self._dispatch(Reset())

    def close(self) -> None:
        self._closed = True
        if self._debouncer.cancel():
            logger.debug("cancelled pending filter on close")
        self._listeners.clear()
        self._settled.set()

    def _settle(self, term: str) -> None:
        self._dispatch(FilterSettled(term))
