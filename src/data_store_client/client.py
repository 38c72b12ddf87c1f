"""DataStoreClient facade over any StoreClient implementation."""

from typing import Generic, TypeVar

from data_store_client.protocols import StoreClient

S = TypeVar("S", bound=StoreClient)


class DataStoreClient(Generic[S]):
    """Reduced get/set surface over a single store client.

    Calling code written against this facade depends only on the
    ``StoreClient`` protocol, so it runs unchanged against the in-memory
    mock in tests and against Redis in production.

    Example usage:
        redis_client = RedisStoreClient("redis://127.0.0.1/")
        await redis_client.open_connection()

        store = DataStoreClient(redis_client)
        await store.set_key_value("key1", "value1")
        value = await store.get_key_value("key1")
    """

    def __init__(self, client: S) -> None:
        self._client = client

    @property
    def store(self) -> S:
        """The wrapped store client."""
        return self._client

    async def set_key_value(self, key: str, value: str) -> bool | None:
        return await self._client.set_key_value(key, value)

    async def get_key_value(self, key: str) -> str | None:
        return await self._client.get_key_value(key)
