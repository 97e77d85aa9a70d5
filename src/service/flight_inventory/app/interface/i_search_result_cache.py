"""
Search Result Cache Interface

Key/value store for search pages and single-flight views. Values are plain
JSON-compatible structures (Decimal, datetime and enums allowed); adapters
own the wire encoding.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ISearchResultCache(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Decoded value, or None on miss/expiry."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        pass
