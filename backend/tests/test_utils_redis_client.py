"""
Tests for the RedisClient utility class.

Covers:
- Client lifecycle (singleton creation/closing).
- Connection URL from REDIS_HOST / REDIS_PORT.
- Distributed lock construction.
"""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest
import redis.asyncio as redis

from utils.redis_client import RedisClient


@pytest.fixture(autouse=True)
def reset_redis_singleton():
    """Reset the RedisClient singleton before and after each test."""
    RedisClient._instance = None
    yield
    RedisClient._instance = None


class TestRedisClientSingleton:
    """Tests for RedisClient singleton behavior."""

    @pytest.mark.asyncio
    async def test_get_client_singleton_behavior(self):
        """get_client returns the same instance on subsequent calls."""
        with patch(
            "utils.redis_client.redis.from_url", new_callable=AsyncMock
        ) as mock_from_url:
            mock_redis = AsyncMock(spec=redis.Redis)
            mock_from_url.return_value = mock_redis

            client1 = await RedisClient.get_client()
            client2 = await RedisClient.get_client()

            assert client1 is client2 is mock_redis
            mock_from_url.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_client_concurrent_access(self):
        """Concurrent callers share a single connection."""
        with patch(
            "utils.redis_client.redis.from_url", new_callable=AsyncMock
        ) as mock_from_url:
            mock_from_url.return_value = AsyncMock(spec=redis.Redis)

            clients = await asyncio.gather(
                RedisClient.get_client(),
                RedisClient.get_client(),
                RedisClient.get_client(),
            )

            assert all(c is clients[0] for c in clients)
            mock_from_url.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_client_uses_env_variables(self):
        """get_client respects REDIS_HOST and REDIS_PORT environment variables."""
        with patch.dict(
            "os.environ", {"REDIS_HOST": "redis.example.com", "REDIS_PORT": "6380"}
        ):
            with patch(
                "utils.redis_client.redis.from_url", new_callable=AsyncMock
            ) as mock_from_url:
                await RedisClient.get_client()

                assert mock_from_url.call_args[0][0] == "redis://redis.example.com:6380"

    @pytest.mark.asyncio
    async def test_get_client_default_host_and_port(self):
        """get_client uses localhost:6379 when env vars are not set."""
        with patch.dict("os.environ", {}, clear=True):
            with patch(
                "utils.redis_client.redis.from_url", new_callable=AsyncMock
            ) as mock_from_url:
                await RedisClient.get_client()

                assert mock_from_url.call_args[0][0] == "redis://localhost:6379"

    @pytest.mark.asyncio
    async def test_get_client_configures_connection_options(self):
        """get_client configures encoding, timeout, and keepalive."""
        with patch(
            "utils.redis_client.redis.from_url", new_callable=AsyncMock
        ) as mock_from_url:
            await RedisClient.get_client()

            call_kwargs = mock_from_url.call_args[1]
            assert call_kwargs["encoding"] == "utf-8"
            assert call_kwargs["decode_responses"] is True
            assert call_kwargs["socket_connect_timeout"] == 5
            assert call_kwargs["socket_keepalive"] is True

    @pytest.mark.asyncio
    async def test_close_closes_and_resets_instance(self):
        """close closes the Redis instance and clears the singleton."""
        mock_redis = AsyncMock(spec=redis.Redis)
        RedisClient._instance = mock_redis

        await RedisClient.close()

        mock_redis.aclose.assert_awaited_once()
        assert RedisClient._instance is None

    @pytest.mark.asyncio
    async def test_close_when_instance_is_none(self):
        """close is a no-op when no instance exists."""
        await RedisClient.close()
        assert RedisClient._instance is None


class TestRedisClientLock:
    """Tests for RedisClient.lock."""

    @pytest.mark.asyncio
    async def test_lock_builds_lock_on_shared_client(self):
        """lock forwards name and timeouts to redis' lock factory."""
        with patch.object(RedisClient, "get_client") as mock_get_client:
            mock_redis = Mock()
            sentinel_lock = Mock()
            mock_redis.lock.return_value = sentinel_lock
            mock_get_client.return_value = mock_redis

            result = await RedisClient.lock("calendar:lock:c:r", timeout=10, blocking_timeout=2)

            assert result is sentinel_lock
            mock_redis.lock.assert_called_once_with(
                "calendar:lock:c:r", timeout=10, blocking_timeout=2
            )

    @pytest.mark.asyncio
    async def test_lock_propagates_connection_error(self):
        """Connection failures surface to the caller."""
        with patch.object(RedisClient, "get_client") as mock_get_client:
            mock_get_client.side_effect = redis.ConnectionError("Connection failed")

            with pytest.raises(redis.ConnectionError):
                await RedisClient.lock("key", timeout=1)
