"""Redis implementation of KeyValueStore.

Each slot is a Redis list under ``pocket_dictionary:<key>``. Writes replace
the list inside a MULTI/EXEC transaction so readers never see a partial list.
"""

import logging
import os

import redis.asyncio as redis
from redis.exceptions import RedisError

from domain.model.errors import StorageError

logger = logging.getLogger(__name__)

REDIS_URL = os.getenv('REDIS_URL', '')
KEY_PREFIX = 'pocket_dictionary:'


class RedisKeyValueStore:
    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self._url = url if url is not None else REDIS_URL
        self._client_cache: redis.Redis | None = client
        self._connection_failed: bool = False

    def _get_client(self) -> redis.Redis:
        """Get Redis client, creating it on first use."""
        if self._client_cache is not None:
            return self._client_cache

        if self._connection_failed:
            raise StorageError("Redis is not available")

        if not self._url:
            logger.error("[REDIS] REDIS_URL not configured. Set REDIS_URL=redis://host:port")
            self._connection_failed = True
            raise StorageError("REDIS_URL not configured")

        try:
            self._client_cache = redis.from_url(
                self._url,
                decode_responses=True,
                socket_connect_timeout=5,
            )
        except ValueError as e:
            logger.error(f"[REDIS] Invalid REDIS_URL: {str(e)[:200]}")
            self._connection_failed = True
            raise StorageError("Invalid REDIS_URL") from e
        return self._client_cache

    @staticmethod
    def _slot(key: str) -> str:
        return f"{KEY_PREFIX}{key}"

    # ── KeyValueStore implementation ─────────────────────────

    async def get_string_list(self, key: str) -> list[str] | None:
        client = self._get_client()
        slot = self._slot(key)
        try:
            if not await client.exists(slot):
                return None
            return list(await client.lrange(slot, 0, -1))
        except RedisError as e:
            logger.warning("Failed to read key-value slot", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to read {key}") from e

    async def set_string_list(self, key: str, values: list[str]) -> None:
        client = self._get_client()
        slot = self._slot(key)
        try:
            async with client.pipeline(transaction=True) as pipe:
                pipe.delete(slot)
                if values:
                    pipe.rpush(slot, *values)
                await pipe.execute()
        except RedisError as e:
            logger.error("Failed to write key-value slot", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to write {key}") from e
        logger.debug("Key-value slot written", extra={"key": key, "count": len(values)})

    async def ping(self) -> bool:
        try:
            return bool(await self._get_client().ping())
        except (StorageError, RedisError, OSError):
            return False

    async def close(self) -> None:
        if self._client_cache is not None:
            await self._client_cache.aclose()
            self._client_cache = None
