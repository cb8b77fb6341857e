"""
Per-key asyncio locks

Serializes multi-step mutations for one logical owner (a session id or a
reward row) inside a worker process. Cross-process safety is provided by
the database (conditional updates, unique constraints).
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable

class KeyedLock:
    """A lazily-populated map of asyncio locks, dropped when unused"""

    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._holders: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def acquire(self, key: Hashable) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                self._locks.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._locks

    def __len__(self) -> int:
        return len(self._locks)

# Shared registry for session-owned state (cart, wishlist, profile)
session_locks = KeyedLock()
