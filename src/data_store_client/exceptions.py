"""Data store client exceptions."""


class StoreClientError(Exception):
    """Base exception for data-store-client."""

    pass


class ConfigError(StoreClientError):
    """Configuration error."""

    pass


class BackendError(StoreClientError):
    """Error surfaced by the backing store's own client library.

    The native exception is kept on ``original`` so callers that care can
    inspect it without this package re-interpreting it.
    """

    def __init__(self, original: BaseException, message: str | None = None) -> None:
        self.original = original
        super().__init__(message or f"{type(original).__name__}: {original}")


class OtherError(StoreClientError):
    """Condition local to this layer, described by a message."""

    pass


class NotConnectedError(OtherError):
    """Operation attempted while the connection handle is absent."""

    def __init__(self, message: str = "Store is not available") -> None:
        super().__init__(message)


class UnsupportedOperationError(OtherError):
    """The store client does not implement the requested operation."""

    def __init__(self, operation: str, backend: str) -> None:
        self.operation = operation
        self.backend = backend
        super().__init__(f"Operation '{operation}' is not supported by the {backend} backend")
