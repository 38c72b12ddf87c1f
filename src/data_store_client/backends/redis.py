"""Redis store client."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis
from redis.exceptions import RedisError

from data_store_client.exceptions import BackendError, NotConnectedError
from data_store_client.observability import Timer, emit_counter, emit_timer, get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class RedisStoreClient:
    """Store client delegating to a Redis-compatible server.

    Uses the ``redis.asyncio`` client with ``decode_responses`` so values
    come back as ``str``. The client multiplexes commands over its own
    connection pool, so one instance may be shared by concurrent tasks on
    the same event loop.
    """

    backend = "redis"

    def __init__(self, url: str = "redis://127.0.0.1/", **kwargs: Any) -> None:
        """Initialize Redis store client.

        Args:
            url: Redis connection URL, e.g. ``redis://127.0.0.1/``
            **kwargs: Ignored (for compatibility with other backends)
        """
        self.url = url
        self._connection: redis.Redis | None = None

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    async def open_connection(self) -> None:
        """Connect and verify the server answers PING.

        Raises:
            BackendError: If the URL is invalid or the server cannot be reached
        """
        if self._connection is not None:
            await self.close()

        client: redis.Redis | None = None
        try:
            client = redis.from_url(self.url, decode_responses=True)
            await client.ping()
        except (RedisError, ValueError) as e:
            if client is not None:
                await client.aclose()
            logger.error(
                "Failed to open connection",
                context={"backend": self.backend, "url": self.url},
                error=e,
            )
            emit_counter("store.errors", {"backend": self.backend, "operation": "open_connection"})
            raise BackendError(e) from e

        self._connection = client
        logger.info("Connection opened", context={"backend": self.backend, "url": self.url})

    async def _call(
        self,
        operation: str,
        key: str,
        command: Callable[[redis.Redis], Awaitable[T]],
    ) -> T:
        """Run one command on the open connection, wrapping Redis errors."""
        if self._connection is None:
            raise NotConnectedError()

        labels = {"backend": self.backend, "operation": operation}
        with Timer() as timer:
            try:
                result = await command(self._connection)
            except RedisError as e:
                logger.error(
                    f"{operation} failed",
                    context={"backend": self.backend, "key": key},
                    error=e,
                )
                emit_counter("store.errors", labels)
                raise BackendError(e) from e

        emit_timer(f"store.{operation}", timer.duration_ms, labels)
        return result

    async def set_key_value(self, key: str, value: str) -> bool | None:
        """Set a value with SET."""
        await self._call("set_key_value", key, lambda con: con.set(key, value))
        return True

    async def get_key_value(self, key: str) -> str | None:
        """Get a value with GET."""
        return await self._call("get_key_value", key, lambda con: con.get(key))

    async def delete_key(self, key: str) -> str | None:
        """Atomically read and remove a key with GETDEL (Redis 6.2+)."""
        return await self._call("delete_key", key, lambda con: con.getdel(key))

    async def append_to_list(self, key: str, value: str) -> None:
        """Append to a list with RPUSH."""
        await self._call("append_to_list", key, lambda con: con.rpush(key, value))

    async def get_list(self, key: str) -> list[str]:
        """Read a whole list with LRANGE 0 -1."""
        return await self._call("get_list", key, lambda con: con.lrange(key, 0, -1))

    async def close(self) -> None:
        """Close the connection pool. No-op if not connected."""
        if self._connection is None:
            return

        connection, self._connection = self._connection, None
        try:
            await connection.aclose()
        except RedisError as e:
            logger.warning(
                "Connection closed with error",
                context={"backend": self.backend, "url": self.url},
                error=e,
            )
            raise BackendError(e) from e

        logger.info("Connection closed", context={"backend": self.backend, "url": self.url})

    async def __aenter__(self) -> "RedisStoreClient":
        await self.open_connection()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
