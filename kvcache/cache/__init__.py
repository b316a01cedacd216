"""Cache client package."""

from kvcache.cache.client import CacheClient
from kvcache.cache.factory import RedisFactory
from kvcache.cache.lifespan import cache_client_lifespan, create_cache_client
from kvcache.cache.result import CacheResult, CacheStatus

__all__ = [
    "CacheClient",
    "CacheResult",
    "CacheStatus",
    "RedisFactory",
    "cache_client_lifespan",
    "create_cache_client",
]
