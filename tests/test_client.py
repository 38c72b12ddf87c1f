"""Tests for the DataStoreClient facade."""

from unittest.mock import AsyncMock

import pytest

from data_store_client import DataStoreClient, MockStoreClient, RedisStoreClient
from data_store_client.exceptions import BackendError, NotConnectedError


class TestDataStoreClient:
    """Tests for DataStoreClient forwarding."""

    @pytest.mark.asyncio
    async def test_forwards_to_mock(self, mock_client):
        await mock_client.open_connection()
        store = DataStoreClient(mock_client)

        assert await store.set_key_value("key1", "value1") is True
        assert await store.get_key_value("key1") == "value1"
        assert await mock_client.get_key_value("key1") == "value1"

    @pytest.mark.asyncio
    async def test_forwards_to_redis(self, redis_client, fake_redis):
        store = DataStoreClient(redis_client)

        await store.set_key_value("key1", "value1")
        assert fake_redis.values == {"key1": "value1"}
        assert await store.get_key_value("key1") == "value1"

    @pytest.mark.asyncio
    async def test_get_missing_key(self, mock_client):
        await mock_client.open_connection()
        store = DataStoreClient(mock_client)
        assert await store.get_key_value("missing") is None

    @pytest.mark.asyncio
    async def test_propagates_not_connected(self, mock_client):
        store = DataStoreClient(mock_client)
        with pytest.raises(NotConnectedError):
            await store.set_key_value("key1", "value1")
        with pytest.raises(NotConnectedError):
            await store.get_key_value("key1")

    @pytest.mark.asyncio
    async def test_propagates_non_redis_error_unchanged(self, redis_client, fake_redis):
        fake_redis.set = AsyncMock(side_effect=RuntimeError("gone"))
        store = DataStoreClient(redis_client)
        # Only redis-py errors are wrapped
        with pytest.raises(RuntimeError):
            await store.set_key_value("key1", "value1")

    @pytest.mark.asyncio
    async def test_propagates_wrapped_redis_error(self, redis_client, fake_redis):
        from redis.exceptions import TimeoutError

        fake_redis.get = AsyncMock(side_effect=TimeoutError("slow"))
        store = DataStoreClient(redis_client)
        with pytest.raises(BackendError):
            await store.get_key_value("key1")

    def test_store_property(self, mock_client):
        store = DataStoreClient(mock_client)
        assert store.store is mock_client

    def test_has_reduced_surface(self):
        store = DataStoreClient(RedisStoreClient("redis://127.0.0.1/"))
        assert not hasattr(store, "delete_key")
        assert not hasattr(store, "append_to_list")


class TestEndToEnd:
    """Full flows through the public API."""

    @pytest.mark.asyncio
    async def test_mock_scenario(self):
        client = MockStoreClient("http://localhost")
        await client.open_connection()

        await client.set_key_value("key1", "value1")
        assert await client.get_key_value("key1") == "value1"
        assert await client.delete_key("key1") == "value1"
        assert await client.get_key_value("key1") is None

    @pytest.mark.asyncio
    async def test_unreachable_redis_never_crashes(self):
        client = RedisStoreClient("redis://127.0.0.1:1/")
        with pytest.raises(BackendError):
            await client.open_connection()

        for call in (
            client.set_key_value("key1", "value1"),
            client.get_key_value("key1"),
            client.delete_key("key1"),
            client.append_to_list("list1", "item1"),
            client.get_list("list1"),
        ):
            with pytest.raises((NotConnectedError, BackendError)):
                await call
