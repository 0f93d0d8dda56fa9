"""
Static file hit counter.

A single process-wide integer. It starts at zero, is bumped on every request
under /app/ and can be reset by the admin endpoint. Nothing is persisted:
a restart starts counting from zero again.
"""

import threading

from starlette.types import ASGIApp, Receive, Scope, Send


class HitCounter:
    """
    Thread-safe counter.

    FastAPI serves requests from several worker threads, so increment and
    reset hold a lock to avoid lost updates.
    """

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one hit and return the new total."""
        with self._lock:
            self._value += 1
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class HitCountingApp:
    """
    ASGI wrapper that counts a hit before passing the request on.

    Wraps the static files app, so 404s under /app/ are counted too.
    """

    def __init__(self, app: ASGIApp, counter: HitCounter):
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
        await self.app(scope, receive, send)


# Process-wide instance shared by the static mount and the admin endpoints
hit_counter = HitCounter()
