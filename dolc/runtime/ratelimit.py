"""Thread-safe fixed-window rate limiter.

Counts requests per client key inside a fixed time window. The compile
endpoint uses it to cap how often one client may request an analysis.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """Allow at most ``max_requests`` per ``window_seconds`` for each key.

    A key's window starts with its first request and resets once
    ``window_seconds`` have passed.
    """

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError(f"max_requests must be positive, got {max_requests}")
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: dict[str, _Window] = {}

    @property
    def max_requests(self) -> int:
        return self._max_requests

    def check(self, key: str) -> bool:
        """Record one request for ``key``; return False if it is over the limit."""
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now > window.reset_at:
                self._windows[key] = _Window(count=1, reset_at=now + self._window_seconds)
                self._prune(now)
                return True

            if window.count >= self._max_requests:
                return False

            window.count += 1
            return True

    def reset(self) -> None:
        """Forget every client window."""
        with self._lock:
            self._windows.clear()

    def _prune(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]
