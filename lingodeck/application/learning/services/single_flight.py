"""Per-key mutual exclusion for cache miss handling within one process."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class KeyedLock:
    """
    Serializes work per cache key.

    Callers that hold the same key run one at a time, callers with different
    keys do not wait on each other. Lock entries are removed once no holder
    or waiter is left, so the registry only grows with in-flight keys.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    def in_flight(self) -> int:
        """Number of keys currently held or awaited."""
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        if not self.enabled:
            yield
            return

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]
