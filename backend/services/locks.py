"""
Write-boundary serialisation for event bookings.

Reading the stored events, checking for a conflict and writing the new
event must happen as one step per (church, resource identity), otherwise
two concurrent bookings of the same slot can both pass the check. The
memory backend covers a single process; the Redis backend covers several
workers sharing one database.
"""

import asyncio
import os
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Optional

from redis.exceptions import LockError

import utils.logging
from services.conflicts import resource_identity
from services.errors import LockUnavailableError
from utils.redis_client import RedisClient

logger = utils.logging.get_logger(__name__)


def lock_key(church_id: str, resource_id: Optional[str]) -> str:
    return f"calendar:lock:{church_id}:{resource_identity(resource_id)}"


class ScheduleLock(ABC):
    """Keyed async lock, one key per church/resource identity pair."""

    @abstractmethod
    def hold(
        self, church_id: str, resource_id: Optional[str]
    ) -> AsyncContextManager[None]:
        """Context manager holding the lock for the pair until exit."""


class MemoryScheduleLock(ScheduleLock):
    """In-process locks, enough when a single worker serves all writes."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def hold(self, church_id: str, resource_id: Optional[str]) -> AsyncIterator[None]:
        async with self._lock_for(lock_key(church_id, resource_id)):
            yield


class RedisScheduleLock(ScheduleLock):
    """
    Distributed locks stored in Redis.

    :param timeout: Seconds after which a held lock expires on its own.
    :param blocking_timeout: Seconds to wait before giving up.
    """

    def __init__(self, timeout: float = 10.0, blocking_timeout: float = 5.0):
        self.timeout = timeout
        self.blocking_timeout = blocking_timeout

    @asynccontextmanager
    async def hold(self, church_id: str, resource_id: Optional[str]) -> AsyncIterator[None]:
        key = lock_key(church_id, resource_id)
        lock = await RedisClient.lock(
            key, timeout=self.timeout, blocking_timeout=self.blocking_timeout
        )
        if not await lock.acquire():
            logger.warning(f"Timed out waiting for scheduling lock {key}")
            raise LockUnavailableError(
                "Another booking for this resource is in progress, try again"
            )
        try:
            yield
        finally:
            try:
                await lock.release()
            except LockError:
                # Expired while held; the next writer already owns the key.
                logger.warning(f"Scheduling lock {key} expired before release")


def schedule_lock_from_env() -> ScheduleLock:
    """
    Build the lock selected by SCHEDULE_LOCK_BACKEND (memory or redis).
    """
    backend = os.getenv("SCHEDULE_LOCK_BACKEND", "memory").lower()
    if backend == "redis":
        return RedisScheduleLock(
            timeout=float(os.getenv("SCHEDULE_LOCK_TIMEOUT_SECONDS", "10")),
            blocking_timeout=float(os.getenv("SCHEDULE_LOCK_WAIT_SECONDS", "5")),
        )
    if backend != "memory":
        raise ValueError(f"Unknown SCHEDULE_LOCK_BACKEND: {backend}")
    return MemoryScheduleLock()
