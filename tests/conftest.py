"""Pytest configuration and fixtures."""

import asyncio

import pytest

from data_store_client.backends import redis as redis_backend
from data_store_client.backends.memory import MockStoreClient
from data_store_client.backends.redis import RedisStoreClient


class FakeRedis:
    """Stands in for ``redis.asyncio.Redis`` with decoded responses.

    Every command yields to the event loop once after applying, the way a
    network round trip would, so concurrent callers interleave.
    """

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.lists: dict[str, list[str]] = {}
        self.closed = False

    async def ping(self) -> bool:
        return True

    async def set(self, key: str, value: str) -> bool:
        self.values[key] = value
        await asyncio.sleep(0)
        return True

    async def get(self, key: str) -> str | None:
        value = self.values.get(key)
        await asyncio.sleep(0)
        return value

    async def getdel(self, key: str) -> str | None:
        return self.values.pop(key, None)

    async def rpush(self, key: str, *values: str) -> int:
        items = self.lists.setdefault(key, [])
        items.extend(values)
        await asyncio.sleep(0)
        return len(items)

    async def lrange(self, key: str, start: int, end: int) -> list[str]:
        items = self.lists.get(key, [])
        return items[start:] if end == -1 else items[start:end + 1]

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary for testing."""
    return {
        "store": {"backend": "redis", "url": "redis://127.0.0.1:6379/0"},
        "logging": {"level": "DEBUG", "format": "text"},
    }


@pytest.fixture
def fake_redis(monkeypatch) -> FakeRedis:
    """Route ``redis.asyncio.from_url`` to an in-process fake."""
    fake = FakeRedis()
    monkeypatch.setattr(redis_backend.redis, "from_url", lambda url, **kwargs: fake)
    return fake


@pytest.fixture
def mock_client() -> MockStoreClient:
    """Create an unopened mock store client."""
    return MockStoreClient("memory://test")


@pytest.fixture
async def redis_client(fake_redis) -> RedisStoreClient:
    """Create a Redis store client connected to the fake server."""
    client = RedisStoreClient("redis://127.0.0.1/")
    await client.open_connection()
    yield client
    await client.close()
