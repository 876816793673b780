import json
from typing import Any, Dict, Optional

from redis.asyncio import Redis

from .base import StorageBackend


class RedisBackend(StorageBackend):
    """Redis storage backend implementation."""

    def __init__(self, redis_client: Redis):
        self.redis = redis_client

    async def set(self, key: str, value: Any) -> None:
        await self.redis.set(key, json.dumps(value))

    async def get(self, key: str) -> Optional[Any]:
        value = await self.redis.get(key)
        return json.loads(value) if value else None

    async def delete(self, key: str) -> bool:
        return bool(await self.redis.delete(key))

    async def zadd(self, key: str, mapping: Dict[str, float]) -> None:
        await self.redis.zadd(key, mapping)

    async def zrevrange(self, key: str, start: int, end: int) -> list:
        return await self.redis.zrevrange(key, start, end)

    async def zrem(self, key: str, member: str) -> None:
        await self.redis.zrem(key, member)

    async def ping(self) -> bool:
        return bool(await self.redis.ping())

    async def close(self) -> None:
        await self.redis.aclose()
