"""Custom exception hierarchy for the LingoDeck application."""


class LingoDeckError(Exception):
    """Base exception for all LingoDeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(LingoDeckError):
    """Request validation error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class ServiceError(LingoDeckError):
    """Service layer error."""


class ProviderError(ServiceError):
    """A call to the generation provider failed."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failed provider operation and reason."""
        self.operation = operation
        self.reason = reason
        super().__init__(f"Provider call '{operation}' failed: {reason}")


class CacheStoreError(ServiceError):
    """Reading from or writing to the cache store failed."""

    def __init__(self, key: str, operation: str, reason: str) -> None:
        """Initialize with the cache key, operation and reason."""
        self.key = key
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cache store {operation} failed for '{key}': {reason}")
