from datetime import date, datetime, tzinfo
import time
from typing import Callable, Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.clock import utc_now
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics
from src.service.flight_inventory.app.result_cache_gateway import ResultCacheGateway
from src.service.flight_inventory.domain.search_cache_key import search_cache_key
from src.service.flight_inventory.domain.search_planner import (
    build_search_plan,
    build_search_result,
    resolve_reference_timezone,
)
from src.service.flight_inventory.domain.value_object.search_query import SearchQuery
from src.service.flight_inventory.domain.value_object.search_result import SearchResult


ROUTE_DEFAULT_LIMIT = 10


class SearchFlightsUseCase:
    """
    Flight search: cache -> repository -> enrichment -> cache.

    Pages are cached by the normalized query for SEARCH_CACHE_TTL_SECONDS and
    never invalidated explicitly; seat counts in a cached page may be stale.
    """

    def __init__(
        self,
        flight_query_repo: IFlightQueryRepo,
        result_cache: ResultCacheGateway,
        search_metrics: ISearchMetrics,
        *,
        reference_tz: Optional[tzinfo] = None,
        clock: Callable[[], datetime] = utc_now,
        ttl_seconds: int = settings.SEARCH_CACHE_TTL_SECONDS,
    ) -> None:
        self.flight_query_repo = flight_query_repo
        self.result_cache = result_cache
        self.search_metrics = search_metrics
        self.reference_tz = reference_tz or resolve_reference_timezone(
            settings.SEARCH_REFERENCE_TIMEZONE
        )
        self.clock = clock
        self.ttl_seconds = ttl_seconds
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        result_cache: ResultCacheGateway = Depends(Provide[Container.result_cache]),
        search_metrics: ISearchMetrics = Depends(Provide[Container.search_metrics]),
    ) -> Self:
        return cls(
            flight_query_repo=flight_query_repo,
            result_cache=result_cache,
            search_metrics=search_metrics,
        )

    @Logger.io
    async def search(self, *, query: SearchQuery) -> SearchResult:
        started = time.perf_counter()
        cache_key = search_cache_key(query)

        with self.tracer.start_as_current_span('use_case.search_flights.cache_lookup') as span:
            cached = await self.result_cache.get(cache_key)
            span.set_attribute('cache_hit', cached is not None)

        if cached is not None:
            result = SearchResult(**cached)
            self.search_metrics.record_search(
                cache_hit=True,
                result_count=len(result.flights),
                duration=time.perf_counter() - started,
            )
            Logger.base.info(f'⚡ [SEARCH] Cache hit {query.origin}->{query.destination}')
            return result

        plan = build_search_plan(query, reference_tz=self.reference_tz, now=self.clock())
        flights, total = await self.flight_query_repo.find_flights(plan=plan)
        result = build_search_result(query, flights, total)

        await self.result_cache.set(cache_key, attrs.asdict(result), self.ttl_seconds)

        self.search_metrics.record_search(
            cache_hit=False,
            result_count=len(result.flights),
            duration=time.perf_counter() - started,
        )
        Logger.base.info(
            f'🔍 [SEARCH] {query.origin}->{query.destination} '
            f'page={query.page} rows={len(result.flights)} total={total}'
        )
        return result

    @Logger.io
    async def search_by_route(
        self,
        *,
        origin: str,
        destination: str,
        start_date: Optional[date] = None,
        limit: int = ROUTE_DEFAULT_LIMIT,
    ) -> SearchResult:
        """Upcoming flights on one route for a day (today by default), earliest first."""
        query = SearchQuery.from_params(
            origin=origin,
            destination=destination,
            departure_date=start_date or self.clock().astimezone(self.reference_tz).date(),
            limit=limit,
            sort_by='departure',
            sort_order='asc',
        )
        return await self.search(query=query)
