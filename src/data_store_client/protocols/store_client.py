"""StoreClient protocol for key-value store clients."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StoreClient(Protocol):
    """Protocol for key-value store clients (Redis, in-memory mock).

    Every method except ``open_connection`` raises ``NotConnectedError``
    while no connection is held. Failures reported by the backing store are
    raised as ``BackendError``.
    """

    @property
    def is_connected(self) -> bool:
        """Whether a connection handle is currently held."""
        ...

    async def open_connection(self) -> None:
        """Connect to the location given at construction."""
        ...

    async def set_key_value(self, key: str, value: str) -> bool | None:
        """Store a scalar value. Returns True once the write is confirmed."""
        ...

    async def get_key_value(self, key: str) -> str | None:
        """Get a scalar value. Returns None if the key is not found."""
        ...

    async def delete_key(self, key: str) -> str | None:
        """Delete a key. Returns the removed value, or None if it was absent."""
        ...

    async def append_to_list(self, key: str, value: str) -> None:
        """Append a value to the end of the list stored at key."""
        ...

    async def get_list(self, key: str) -> list[str]:
        """Get the whole list stored at key. Empty if the key is absent."""
        ...

    async def close(self) -> None:
        """Release the connection handle. No-op if not connected."""
        ...
