"""Protocol interfaces for pluggable store clients."""

from data_store_client.protocols.store_client import StoreClient

__all__ = [
    "StoreClient",
]
