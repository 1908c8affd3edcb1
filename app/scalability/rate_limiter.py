"""Per-caller sliding-window rate limiter. Over the limit -> TooManyRequestsError."""

import time
from typing import Protocol

from app.domain.exceptions import TooManyRequestsError


class RateLimitBackend(Protocol):
    """Backend for rate limit state (e.g. Redis). Injected."""

    async def incr_window(self, key: str, window_seconds: int) -> int: ...


class InMemoryRateLimitBackend:
    """In-memory sliding window: key -> list of timestamps. For tests or single-node."""

    def __init__(self) -> None:
        self._windows: dict[str, list[float]] = {}

    async def incr_window(self, key: str, window_seconds: int) -> int:
        now = time.monotonic()
        cutoff = now - window_seconds
        self._evict_expired(cutoff)
        window = [t for t in self._windows.get(key, []) if t > cutoff]
        window.append(now)
        self._windows[key] = window
        return len(window)

    def _evict_expired(self, cutoff: float) -> None:
        """Drop keys whose newest hit is outside the window."""
        for key in [k for k, hits in self._windows.items() if not hits or hits[-1] <= cutoff]:
            del self._windows[key]


class CallerRateLimiter:
    """Per-caller rate limiter keyed by the caller's email."""

    def __init__(
        self,
        backend: RateLimitBackend,
        requests_per_window: int = 100,
        window_seconds: int = 60,
    ) -> None:
        self._backend = backend
        self._limit = requests_per_window
        self._window = window_seconds
        self._key_prefix = "rate:caller:"

    def _key(self, caller_email: str) -> str:
        return f"{self._key_prefix}{caller_email}"

    async def allow_request(self, caller_email: str) -> bool:
        """Record one request for caller. Returns True if still under limit."""
        count = await self._backend.incr_window(self._key(caller_email), self._window)
        return count <= self._limit

    async def check(self, caller_email: str) -> None:
        """Raises TooManyRequestsError when caller is over its limit."""
        if not await self.allow_request(caller_email):
            raise TooManyRequestsError(
                f"Rate limit of {self._limit} requests per {self._window}s exceeded"
            )
