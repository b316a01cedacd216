"""Cache client for a Redis-compatible key-value service."""

import json
from typing import Any, Optional

from loguru import logger
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from kvcache.core.constants import LogMessages
from kvcache.core.exceptions import (
    CacheConnectionError,
    CacheError,
    CacheOperationError,
)
from kvcache.cache.result import CacheResult

CONNECTION_ERRORS = (RedisConnectionError, RedisTimeoutError)


class CacheClient:
    """
    Async get/set/delete over one shared Redis connection handle.

    Failures are logged and never raised: ``get`` answers ``None``,
    ``set`` and ``delete`` return quietly. Use ``fetch`` to tell a missing
    key apart from an unreachable service.
    """

    def __init__(self, redis: Redis) -> None:
        self.redis = redis
        self._alive = False

    async def connect(self) -> bool:
        """
        Perform the initial handshake with the cache service.

        :return: whether the service answered.
        """
        if not await self.ping():
            return False
        logger.info(LogMessages.CONNECTED.format(address=self._address()))
        return True

    def is_alive(self) -> bool:
        """
        Whether the connection was up as of the last contact.

        An idle connection dropped by the server is only noticed by
        the next command, call ``ping`` to refresh the status.
        """
        return self._alive

    async def ping(self) -> bool:
        """Refresh and return the connection status."""
        try:
            await self.redis.ping()
        except Exception as e:
            self._on_error(e)
            return False
        self._alive = True
        return True

    async def fetch(self, key: str) -> CacheResult:
        """
        Look up ``key`` and report hit, miss or failure.

        Args:
            key: Cache key to retrieve

        Returns:
            CacheResult carrying the value or the error
        """
        try:
            value = await self.redis.get(key)
        except Exception as e:
            self._on_error(e)
            logger.error(LogMessages.GET_FAILED.format(key=key, message=e))
            return CacheResult.failed(self._as_cache_error(e))

        self._alive = True
        if value is None:
            return CacheResult.miss()
        return CacheResult.hit(value)

    async def get(self, key: str) -> Optional[str]:
        """Get value by key, ``None`` when absent or on error."""
        result = await self.fetch(key)
        return result.value

    async def set(self, key: str, value: str, duration: int) -> None:
        """
        Store ``value`` under ``key`` for ``duration`` seconds.

        Args:
            key: Cache key
            value: Value to store
            duration: Time to live in seconds
        """
        try:
            await self.redis.set(key, value, ex=duration)
        except Exception as e:
            self._on_error(e)
            logger.error(
                LogMessages.SET_FAILED.format(key=key, value=value, message=e),
            )
            return
        self._alive = True

    async def delete(self, key: str) -> None:
        """Delete key. A missing key is not an error."""
        try:
            await self.redis.delete(key)
        except Exception as e:
            self._on_error(e)
            logger.error(LogMessages.DELETE_FAILED.format(key=key, message=e))
            return
        self._alive = True

    async def get_json(self, key: str) -> Optional[Any]:
        """Get JSON-deserialized value by key."""
        value = await self.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            logger.warning(LogMessages.JSON_DECODE_FAILED.format(key=key, message=e))
            return None

    async def set_json(self, key: str, value: Any, duration: int) -> None:
        """Set JSON-serialized value with expiration."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error(LogMessages.JSON_ENCODE_FAILED.format(key=key, message=e))
            return
        await self.set(key, payload, duration)

    async def close(self) -> None:
        """Close the connection handle and disconnect its pool."""
        await self.redis.aclose(close_connection_pool=True)
        self._alive = False

    def _address(self) -> str:
        pool = self.redis.connection_pool
        kwargs = pool.connection_kwargs
        if "host" in kwargs:
            return f"{kwargs['host']}:{kwargs.get('port', 6379)}"
        if "path" in kwargs:
            return kwargs["path"]
        return pool.connection_class.__name__

    def _on_error(self, error: Exception) -> None:
        """Observer for connection-level failures."""
        if not isinstance(error, CONNECTION_ERRORS):
            return
        self._alive = False
        logger.error(LogMessages.CLIENT_ERROR.format(message=error))

    @staticmethod
    def _as_cache_error(error: Exception) -> CacheError:
        detail = f"{error.__class__.__name__}: {error!s}"
        if isinstance(error, CONNECTION_ERRORS):
            return CacheConnectionError(detail=detail)
        return CacheOperationError(detail=detail)
