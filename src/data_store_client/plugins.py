"""Store client discovery via Python entry points."""

from importlib.metadata import entry_points
from typing import Any

from data_store_client.protocols import StoreClient

BACKEND_GROUP = "data_store_client.backends"


def discover_backends() -> dict[str, Any]:
    """Discover all registered store client backends.

    Returns:
        Dictionary mapping backend names to their classes
    """
    eps = entry_points(group=BACKEND_GROUP)
    return {ep.name: ep.load() for ep in eps}


def get_backend(name: str) -> Any:
    """Get a store client class by backend name.

    Args:
        name: The backend name (e.g., "memory", "redis")

    Returns:
        The store client class

    Raises:
        ValueError: If the backend is not found
    """
    backends = discover_backends()
    if name not in backends:
        available = ", ".join(sorted(backends.keys())) or "(none)"
        raise ValueError(f"Backend '{name}' not found. Available: {available}")
    return backends[name]


def create_store_client(backend: str, url: str, **kwargs: Any) -> StoreClient:
    """Create an unopened StoreClient instance.

    Args:
        backend: The backend name (e.g., "memory", "redis")
        url: Location the client connects to
        **kwargs: Backend-specific configuration

    Returns:
        A StoreClient implementation
    """
    cls = get_backend(backend)
    return cls(url, **kwargs)
