"""
Async Redis Cache

ICache implementation on top of redis.asyncio. Values are stored as JSON.
Backend failures are logged and reported as a miss (get) or False
(set/delete); they are never raised to the caller.
"""

import asyncio
import json
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import redis.asyncio as aioredis

from storefront.config.settings import Settings, get_settings
from storefront.core.interfaces.cache import CacheBackend, CacheSerializationError

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if hasattr(value, "to_dict") and callable(value.to_dict):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class AsyncRedisCache:
    """
    Async cache backed by Redis.

    Usage:
        cache = AsyncRedisCache(prefix="storefront")
        await cache.connect()

        await cache.set("cart:123", {"id": "123"}, ttl=300)
        value = await cache.get("cart:123")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        prefix: str = "",
        client: aioredis.Redis | None = None,
    ):
        self.settings = settings or get_settings()
        self.prefix = prefix
        self._redis_client: aioredis.Redis | None = client
        self._is_dummy = False

    @property
    def backend(self) -> CacheBackend:
        return CacheBackend.REDIS

    @property
    def is_dummy(self) -> bool:
        return self._is_dummy

    async def connect(self, max_retries: int = 3, retry_delay: float = 1.0) -> None:
        """Initialize async Redis connection with retries."""
        retries = 0
        last_error: Exception | None = None

        while retries < max_retries:
            try:
                self._redis_client = aioredis.Redis(
                    host=self.settings.REDIS_HOST,
                    port=self.settings.REDIS_PORT,
                    db=self.settings.REDIS_DB,
                    password=self.settings.REDIS_PASSWORD,
                    decode_responses=True,
                    socket_timeout=self.settings.REDIS_SOCKET_TIMEOUT,
                    socket_connect_timeout=self.settings.REDIS_SOCKET_TIMEOUT,
                )
                await self._redis_client.ping()
                logger.info(
                    f"Async Redis connection established: "
                    f"{self.settings.REDIS_HOST}:{self.settings.REDIS_PORT}"
                )
                self._is_dummy = False
                return
            except (aioredis.ConnectionError, aioredis.TimeoutError) as e:
                retries += 1
                last_error = e
                logger.warning(f"Async Redis connection attempt {retries}/{max_retries} failed: {e}")
                if retries < max_retries:
                    await asyncio.sleep(retry_delay)
            except Exception as e:
                logger.error(f"Unexpected error connecting to async Redis: {e}")
                last_error = e
                break

        logger.error(f"Could not establish async Redis connection after {max_retries} attempts: {last_error}")
        # Without Redis every read is a miss and every write is a no-op
        self._redis_client = None
        self._is_dummy = True

    async def _ensure_connected(self) -> None:
        """Ensure Redis is connected, lazy initialization."""
        if self._redis_client is None and not self._is_dummy:
            await self.connect()

    def _get_key(self, key: str) -> str:
        """Build full key with prefix."""
        return f"{self.prefix}:{key}" if self.prefix else key

    def _serialize(self, value: Any) -> str:
        try:
            return json.dumps(value, default=_json_default)
        except (TypeError, ValueError) as e:
            raise CacheSerializationError(f"Cannot serialize value: {e}") from e

    def _deserialize(self, data: str | bytes) -> Any:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        try:
            return json.loads(data)
        except (TypeError, ValueError) as e:
            raise CacheSerializationError(f"Cannot deserialize value: {e}") from e

    async def get(self, key: str) -> Any | None:
        """Get a value by its key; None on miss or failure."""
        await self._ensure_connected()

        if self._is_dummy:
            logger.debug(f"Async dummy Redis: get({key}) -> None")
            return None

        try:
            redis_key = self._get_key(key)
            data = await self._redis_client.get(redis_key)  # type: ignore[union-attr]

            if not data:
                logger.debug(f"Key {redis_key} not found in async Redis")
                return None

            return self._deserialize(data)

        except Exception as e:
            logger.error(f"Error getting data from async Redis: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value by its key."""
        await self._ensure_connected()

        if self._is_dummy:
            logger.debug(f"Async dummy Redis: set({key}) -> False")
            return False

        try:
            serialized = self._serialize(value)
            redis_key = self._get_key(key)
            await self._redis_client.set(redis_key, serialized, ex=ttl)  # type: ignore[union-attr]
            return True

        except Exception as e:
            logger.error(f"Error saving to async Redis: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete a value by its key."""
        await self._ensure_connected()

        if self._is_dummy:
            logger.debug(f"Async dummy Redis: delete({key}) -> False")
            return False

        try:
            result = await self._redis_client.delete(self._get_key(key))  # type: ignore[union-attr]
            return bool(result)
        except Exception as e:
            logger.error(f"Error deleting from async Redis: {e}")
            return False

    async def delete_many(self, keys: list[str]) -> int:
        """Delete several keys in one call; returns how many existed."""
        if not keys:
            return 0

        await self._ensure_connected()

        if self._is_dummy:
            return 0

        try:
            result = await self._redis_client.delete(*[self._get_key(k) for k in keys])  # type: ignore[union-attr]
            return int(result or 0)
        except Exception as e:
            logger.error(f"Error deleting keys from async Redis: {e}")
            return 0

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis_client and not self._is_dummy:
            await self._redis_client.aclose()
            logger.info("Async Redis connection closed")
