from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from kvcache.cache.client import CacheClient
from kvcache.cache.factory import RedisFactory
from kvcache.settings import Settings, settings


def create_cache_client(app_settings: Optional[Settings] = None) -> CacheClient:
    """
    Build a cache client from settings.

    The client is not connected yet, await ``CacheClient.connect``
    before handing it to consumers. ``CacheClient.close`` releases
    the connection pool as well.

    :param app_settings: settings to use, module settings by default.
    :return: cache client.
    """
    app_settings = app_settings or settings
    redis_factory = RedisFactory(str(app_settings.redis_url))
    return CacheClient(redis_factory.get_connection())


@asynccontextmanager
async def cache_client_lifespan(
    app_settings: Optional[Settings] = None,
) -> AsyncGenerator[CacheClient, None]:
    """
    Create the shared cache client and release it on exit.

    A service that is down at startup is logged, not raised,
    so the yielded client may report ``is_alive() is False``.

    :param app_settings: settings to use, module settings by default.
    :yield: connected cache client.
    """
    client = create_cache_client(app_settings)
    await client.connect()

    try:
        yield client
    finally:
        await client.close()
