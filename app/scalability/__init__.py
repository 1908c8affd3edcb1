"""Scalability layer: per-caller rate limiting. No FastAPI."""

from app.scalability.rate_limiter import CallerRateLimiter, InMemoryRateLimitBackend, RateLimitBackend

__all__ = [
    "CallerRateLimiter",
    "InMemoryRateLimitBackend",
    "RateLimitBackend",
]
