"""Search Result Cache - in-process TTL implementation (single instance / tests)"""

import time
from typing import Any, Callable, Dict, Optional, Tuple

from src.service.flight_inventory.app.interface.i_search_result_cache import ISearchResultCache
from src.service.flight_inventory.driven_adapter.cache.cache_codec import decode, encode


class InMemorySearchResultCache(ISearchResultCache):
    """
    Entries are stored encoded, exactly as the Redis adapter would store them,
    so a hit returns a fresh decoded copy and never shares mutable state.
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[str, Tuple[float, bytes]] = {}

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, raw = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return decode(raw)

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        now = self._clock()
        self._purge_expired(now)
        self._entries[key] = (now + ttl_seconds, encode(value))

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def size(self) -> int:
        return len(self._entries)

    def _purge_expired(self, now: float) -> None:
        # search keys are unbounded, so expired pages must not wait for a read
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
