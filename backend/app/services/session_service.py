import os
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from app.services.controller_service import AnalyzerController

# Idle widgets are dropped after this many seconds
SESSION_TTL_SECONDS = int(os.environ.get("SESSION_TTL_SECONDS", 30 * 60))
# Oldest widgets are dropped once this many are open
MAX_SESSIONS = int(os.environ.get("MAX_SESSIONS", 100))


class SessionRegistry:
    """In-memory store of one AnalyzerController per open widget.

    Sessions expire after ttl_seconds without a request, and the least
    recently used session is evicted once max_sessions is reached.
    """

    def __init__(
        self,
        ttl_seconds: float = SESSION_TTL_SECONDS,
        max_sessions: int = MAX_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self.clock = clock
        self._sessions: "OrderedDict[str, Tuple[AnalyzerController, float]]" = (
            OrderedDict()
        )
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            self._expire()
            return len(self._sessions)

    def add(self, session_id: str, controller: AnalyzerController):
        with self._lock:
            self._expire()
            while len(self._sessions) >= self.max_sessions:
                self._sessions.popitem(last=False)
            self._sessions[session_id] = (controller, self.clock())

    def get(self, session_id: str) -> Optional[AnalyzerController]:
        """Returns the controller and marks the session as recently used."""
        with self._lock:
            self._expire()
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            controller = entry[0]
            self._sessions[session_id] = (controller, self.clock())
            self._sessions.move_to_end(session_id)
            return controller

    def pop(self, session_id: str) -> Optional[AnalyzerController]:
        with self._lock:
            entry = self._sessions.pop(session_id, None)
            return entry[0] if entry else None

    def clear(self):
        with self._lock:
            self._sessions.clear()

    def _expire(self):
        # Entries are kept in last-used order, so stale ones are at the front
        cutoff = self.clock() - self.ttl_seconds
        while self._sessions:
            session_id, (_, last_used) = next(iter(self._sessions.items()))
            if last_used > cutoff:
                break
            del self._sessions[session_id]
