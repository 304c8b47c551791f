import asyncio
import os
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.lock import Lock


class RedisClient:
    """Process-wide Redis connection shared by the scheduling lock."""

    _instance: Optional[redis.Redis] = None
    _lock: asyncio.Lock = asyncio.Lock()

    @classmethod
    def url(cls) -> str:
        return f"redis://{os.getenv('REDIS_HOST', 'localhost')}:{os.getenv('REDIS_PORT', '6379')}"

    @classmethod
    async def get_client(cls) -> redis.Redis:
        """
        Return the currently running Redis instance.
        If no instance is running, create a new instance.
        :return: redis.Redis instance
        """
        async with cls._lock:
            if cls._instance is None:
                cls._instance = await redis.from_url(
                    cls.url(),
                    encoding="utf-8",
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
        return cls._instance

    @classmethod
    async def lock(
        cls, name: str, timeout: float, blocking_timeout: Optional[float] = None
    ) -> Lock:
        """
        Build a distributed lock on the shared connection.
        :param name: Redis key of the lock.
        :param timeout: Seconds before the lock expires on its own.
        :param blocking_timeout: Seconds to wait for the lock, None waits forever.
        :return: An unacquired redis lock, usable with ``async with``.
        """
        client = await cls.get_client()
        return client.lock(name, timeout=timeout, blocking_timeout=blocking_timeout)

    @classmethod
    async def close(cls) -> None:
        """
        Closes the redis connection.
        """
        if cls._instance is not None:
            await cls._instance.aclose()
            cls._instance = None
