"""In-memory mock store client."""

import asyncio
from typing import Any

from data_store_client.exceptions import NotConnectedError, UnsupportedOperationError
from data_store_client.observability import get_logger

logger = get_logger(__name__)


class MockStoreClient:
    """In-memory store client backed by an ordered dict.

    Suitable for development and testing. Data lives only as long as the
    connection: ``open_connection`` starts from an empty mapping and
    ``close`` discards it. List operations are not supported.
    """

    backend = "memory"

    def __init__(self, url: str = "memory://", **kwargs: Any) -> None:
        """Initialize mock store client.

        Args:
            url: Location descriptor, kept for parity with other clients
            **kwargs: Ignored (for compatibility with other backends)
        """
        self.url = url
        self._connection: dict[str, str] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def _require_connection(self) -> dict[str, str]:
        if self._connection is None:
            raise NotConnectedError()
        return self._connection

    async def open_connection(self) -> None:
        """Start a fresh, empty mapping."""
        async with self._lock:
            self._connection = {}
        logger.debug("Connection opened", context={"backend": self.backend, "url": self.url})

    async def set_key_value(self, key: str, value: str) -> bool | None:
        """Set a value."""
        async with self._lock:
            self._require_connection()[key] = value
        return True

    async def get_key_value(self, key: str) -> str | None:
        """Get a value by key."""
        async with self._lock:
            return self._require_connection().get(key)

    async def delete_key(self, key: str) -> str | None:
        """Delete a key, returning the removed value."""
        async with self._lock:
            return self._require_connection().pop(key, None)

    async def append_to_list(self, key: str, value: str) -> None:
        self._require_connection()
        raise UnsupportedOperationError("append_to_list", self.backend)

    async def get_list(self, key: str) -> list[str]:
        self._require_connection()
        raise UnsupportedOperationError("get_list", self.backend)

    async def keys(self) -> list[str]:
        """List stored keys in insertion order. Useful for testing."""
        async with self._lock:
            return list(self._require_connection())

    async def close(self) -> None:
        """Discard the mapping."""
        async with self._lock:
            if self._connection is None:
                return
            self._connection = None
        logger.debug("Connection closed", context={"backend": self.backend, "url": self.url})

    async def __aenter__(self) -> "MockStoreClient":
        await self.open_connection()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
