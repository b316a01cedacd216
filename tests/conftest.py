from typing import AsyncGenerator, Generator, List
from unittest.mock import AsyncMock

import pytest
from fakeredis import FakeServer
from fakeredis.aioredis import FakeConnection, FakeRedis
from loguru import logger
from redis.asyncio import ConnectionPool
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

from kvcache.cache.client import CacheClient


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """
    Backend for anyio pytest plugin.

    :return: backend name.
    """
    return "asyncio"


def _fake_redis(server: FakeServer) -> FakeRedis:
    return FakeRedis(
        connection_pool=ConnectionPool(
            connection_class=FakeConnection,
            server=server,
            decode_responses=True,
            retry=Retry(NoBackoff(), 0),
        ),
    )


@pytest.fixture
async def fake_redis_client() -> AsyncGenerator[FakeRedis, None]:
    """
    Get instance of a fake redis client.

    :yield: FakeRedis instance.
    """
    server = FakeServer()
    server.connected = True
    client = _fake_redis(server)
    await client.flushall()

    yield client

    await client.aclose()


@pytest.fixture
async def cache_client(fake_redis_client: FakeRedis) -> CacheClient:
    """Connected cache client over a fake redis server."""
    client = CacheClient(fake_redis_client)
    await client.connect()
    return client


@pytest.fixture
async def down_cache_client() -> AsyncGenerator[CacheClient, None]:
    """Cache client whose server refuses every connection."""
    server = FakeServer()
    server.connected = False
    client = CacheClient(_fake_redis(server))

    yield client

    await client.close()


@pytest.fixture
def mock_redis_session() -> AsyncMock:
    """Fixture for a mock redis session."""
    return AsyncMock()


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collect loguru messages emitted during a test."""
    messages: List[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
    )

    yield messages

    logger.remove(handler_id)
