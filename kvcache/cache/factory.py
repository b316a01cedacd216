"""Redis factory."""

from redis.asyncio import ConnectionPool, Redis

from kvcache.core.constants import AppConfig


class RedisFactory:
    """Redis factory."""

    def __init__(self, redis_url: str) -> None:
        self.pool = ConnectionPool.from_url(
            url=redis_url,
            socket_connect_timeout=AppConfig.REDIS_SOCKET_CONNECT_TIMEOUT,
            socket_timeout=AppConfig.REDIS_SOCKET_TIMEOUT,
            socket_keepalive=AppConfig.REDIS_SOCKET_KEEPALIVE,
            health_check_interval=AppConfig.REDIS_HEALTH_CHECK_INTERVAL,
            decode_responses=AppConfig.REDIS_DECODE_RESPONSES,
        )

    def get_connection(self) -> Redis:
        """Get connection."""
        return Redis(connection_pool=self.pool)
