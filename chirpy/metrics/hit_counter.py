"""
Process-wide hit counter for the static file server.

One HitCounter is created at startup and handed to the application factory.
The counting middleware increments it; the admin endpoints read and reset it.
"""

from __future__ import annotations

import threading

from starlette.types import ASGIApp, Receive, Scope, Send


class HitCounter:
    """Thread-safe non-negative counter.

    The lock makes increment/reset safe from both the event loop and the
    thread pool FastAPI runs sync handlers on.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hits = 0

    def increment(self) -> None:
        with self._lock:
            self._hits += 1

    def read(self) -> int:
        with self._lock:
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0

    def middleware(self, app: ASGIApp) -> ASGIApp:
        """Wrap an ASGI app so every HTTP request to it counts one hit first."""
        return CountingMiddleware(app, self)

    def __repr__(self) -> str:
        return f"HitCounter(hits={self.read()})"


class CountingMiddleware:
    """ASGI wrapper: increment the counter, then delegate."""

    def __init__(self, app: ASGIApp, counter: HitCounter) -> None:
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
        await self.app(scope, receive, send)
