"""
Result Cache Gateway

Wraps the ResultCache port with the service's cache policy:
- disabled cache: every get misses, set/delete are no-ops
- I/O failure (InternalError from the adapter): counted, then re-raised,
  or logged and treated as a miss when the cache is configured fail-open
"""

from typing import Any, Optional

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InternalError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics
from src.service.flight_inventory.app.interface.i_search_result_cache import ISearchResultCache


class ResultCacheGateway:
    def __init__(
        self,
        *,
        cache: ISearchResultCache,
        metrics: ISearchMetrics,
        enabled: bool = settings.SEARCH_CACHE_ENABLED,
        fail_open: bool = settings.SEARCH_CACHE_FAIL_OPEN,
    ) -> None:
        self.cache = cache
        self.metrics = metrics
        self.enabled = enabled
        self.fail_open = fail_open

    def _handle_failure(self, operation: str, key: str, error: InternalError) -> None:
        self.metrics.record_cache_error(operation=operation)
        if not self.fail_open:
            raise error
        Logger.base.warning(
            f'⚠️ [CACHE] {operation} {key} failed, continuing without cache: {error}'
        )

    async def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None
        try:
            return await self.cache.get(key)
        except InternalError as e:
            self._handle_failure('get', key, e)
            return None

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        if not self.enabled:
            return
        try:
            await self.cache.set(key, value, ttl_seconds)
        except InternalError as e:
            self._handle_failure('set', key, e)

    async def delete(self, key: str) -> None:
        if not self.enabled:
            return
        try:
            await self.cache.delete(key)
        except InternalError as e:
            self._handle_failure('delete', key, e)
