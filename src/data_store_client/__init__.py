"""Data Store Client - a minimal async key-value store abstraction."""

from data_store_client.backends.memory import MockStoreClient
from data_store_client.backends.redis import RedisStoreClient
from data_store_client.client import DataStoreClient
from data_store_client.config import Config, create_store_client_from_config
from data_store_client.exceptions import (
    BackendError,
    ConfigError,
    NotConnectedError,
    OtherError,
    StoreClientError,
    UnsupportedOperationError,
)
from data_store_client.observability import (
    LogLevel,
    RequestContext,
    configure_logging,
    get_logger,
    register_metric_callback,
)
from data_store_client.plugins import create_store_client
from data_store_client.protocols import StoreClient

__version__ = "0.1.0"
__all__ = [
    # Core
    "DataStoreClient",
    "StoreClient",
    # Clients
    "MockStoreClient",
    "RedisStoreClient",
    "create_store_client",
    # Config
    "Config",
    "create_store_client_from_config",
    # Errors
    "BackendError",
    "ConfigError",
    "NotConnectedError",
    "OtherError",
    "StoreClientError",
    "UnsupportedOperationError",
    # Observability
    "LogLevel",
    "RequestContext",
    "configure_logging",
    "get_logger",
    "register_metric_callback",
]
