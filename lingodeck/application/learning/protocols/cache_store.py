"""Protocol for the durable key to document cache store."""

from typing import Protocol, TypeVar

from lingodeck.domain.learning.entities.cache_entry import CacheEntry

T = TypeVar("T")


class CacheStoreProtocol(Protocol[T]):
    """
    Protocol for a cache collection addressed by key.

    Point lookups only. Implementations raise CacheStoreError when the
    underlying store fails.
    """

    def exists(self, key: str) -> bool:
        """Check whether an entry is stored under ``key``."""
        ...

    def get(self, key: str) -> CacheEntry[T] | None:
        """
        Get the entry stored under ``key``.

        Returns:
            The entry, or None if nothing is stored under the key
        """
        ...

    def put(self, key: str, payload: T) -> CacheEntry[T]:
        """
        Store ``payload`` under ``key``.

        Safe to call when another writer already stored the key; the last
        write wins.

        Returns:
            The stored entry
        """
        ...
