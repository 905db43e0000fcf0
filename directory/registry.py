# registry.py - keeps one DirectorySession per browser session on a shared event loop
import asyncio
import logging
import threading
from collections import OrderedDict
from typing import Awaitable, Callable, Optional, TypeVar

from directory.config import DirectoryConfig
from directory.session import DirectorySession, Fetch

logger = logging.getLogger(__name__)

T = TypeVar("T")
Action = Callable[[DirectorySession], Awaitable[T]]

MAX_SESSIONS = 1000


class SessionRegistry:
    """Owns the event loop every DirectorySession runs on.

    Request threads never touch a session directly; they submit an action
    that runs on the loop thread. The first action for a session id creates
    the session and starts its one and only load. Least recently used
    sessions are closed once more than ``max_sessions`` are tracked.
    """

    def __init__(self, fetch: Fetch, config: Optional[DirectoryConfig] = None,
                 max_sessions: int = MAX_SESSIONS):
        self.config = config or DirectoryConfig()
        self.max_sessions = max_sessions
        self._fetch = fetch
        self._sessions: "OrderedDict[str, DirectorySession]" = OrderedDict()
        self._loads = set()
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever,
                                        name="directory-sessions", daemon=True)
        self._thread.start()

    @property
    def timeout(self) -> float:
        return self.config.http_timeout + self.config.debounce_seconds + 5.0

    def run(self, session_id: str, action: "Action[T]") -> T:
        """Run ``action(session)`` on the loop thread and wait for its result."""
        future = asyncio.run_coroutine_threadsafe(self._run(session_id, action), self._loop)
        return future.result(self.timeout)

    def __len__(self) -> int:
        return len(self._sessions)

    async def _run(self, session_id, action):
        return await action(self._session(session_id))

    def _session(self, session_id: str) -> DirectorySession:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            return session
        session = DirectorySession(self._fetch, self.config)
        self._sessions[session_id] = session
        load = self._loop.create_task(session.start())
        self._loads.add(load)
        load.add_done_callback(self._load_done)
        while len(self._sessions) > self.max_sessions:
            stale_id, stale = self._sessions.popitem(last=False)
            logger.debug("closing idle session %s", stale_id)
            stale.close()
        return session

    def _load_done(self, load: asyncio.Task) -> None:
        self._loads.discard(load)
        if not load.cancelled() and load.exception() is not None:
            logger.error("directory load crashed", exc_info=load.exception())

    def shutdown(self) -> None:
        async def close_all():
            for session in self._sessions.values():
                session.close()
            self._sessions.clear()

        if self._loop.is_closed():
            return
        asyncio.run_coroutine_threadsafe(close_all(), self._loop).result(self.timeout)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(self.timeout)
        self._loop.close()
