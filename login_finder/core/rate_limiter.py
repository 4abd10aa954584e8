"""
Fixed-window request rate limiting per client.
"""
import time
from typing import Callable, Dict, Tuple


class RateLimiter:
    """Allows at most ``max_requests`` per client within each window."""

    def __init__(self, max_requests: int = 30, window_seconds: float = 60.0,
                 clock: Callable[[], float] = time.monotonic):
        """Initialize rate limiter.

        Args:
            max_requests: Requests allowed per window
            window_seconds: Window length in seconds
            clock: Monotonic time source
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}

    def hit(self, key: str) -> bool:
        """Record a request for ``key``.

        Returns:
            True if the request is allowed, False if the limit is exceeded
        """
        now = self.clock()
        self._prune(now)

        started, count = self._windows.get(key, (now, 0))
        count += 1
        self._windows[key] = (started, count)
        return count <= self.max_requests

    def _prune(self, now: float) -> None:
        expired = [
            key for key, (started, _) in self._windows.items()
            if now - started >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
