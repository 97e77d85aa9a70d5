"""Search Result Cache - Redis implementation"""

from typing import Any, Callable, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.platform.exception.exceptions import InternalError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_search_result_cache import ISearchResultCache
from src.service.flight_inventory.driven_adapter.cache.cache_codec import decode, encode


class RedisSearchResultCache(ISearchResultCache):
    """
    Values are orjson-encoded and written with SET EX, so entries expire on
    their own; only single-flight keys are ever deleted explicitly.
    """

    def __init__(self, *, client_provider: Callable[[], Redis]) -> None:
        # Resolved per call: the client is connected during app startup
        self._client_provider = client_provider

    async def get(self, key: str) -> Optional[Any]:
        try:
            raw = await self._client_provider().get(key)
        except RedisError as e:
            raise InternalError(f'Cache read failed: {e}', code='CACHE_UNAVAILABLE') from e
        if raw is None:
            return None
        return decode(raw)

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            await self._client_provider().set(key, encode(value), ex=ttl_seconds)
        except RedisError as e:
            raise InternalError(f'Cache write failed: {e}', code='CACHE_UNAVAILABLE') from e

    async def delete(self, key: str) -> None:
        try:
            await self._client_provider().delete(key)
        except RedisError as e:
            raise InternalError(f'Cache delete failed: {e}', code='CACHE_UNAVAILABLE') from e
        Logger.base.debug(f'[CACHE] Deleted {key}')
