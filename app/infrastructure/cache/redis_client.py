# app/infrastructure/cache/redis_client.py

import redis.asyncio as redis

from app.config.settings import settings


class RedisClient:
    def __init__(self, url: str | None = None):
        self.client = redis.from_url(
            url or settings.redis_url,
            decode_responses=True,
        )

    async def incr_window(self, key: str, window_seconds: int) -> int:
        """Fixed window counter: INCR, start the TTL on first hit. Returns count in window."""
        current = await self.client.incr(key)
        if current == 1:
            await self.client.expire(key, window_seconds)
        return current

    async def close(self) -> None:
        await self.client.aclose()
