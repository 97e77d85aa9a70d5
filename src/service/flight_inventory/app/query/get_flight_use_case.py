from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.result_cache_gateway import ResultCacheGateway
from src.service.flight_inventory.domain.search_cache_key import flight_cache_key
from src.service.flight_inventory.domain.search_planner import enrich_flight
from src.service.flight_inventory.domain.value_object.search_result import EnrichedFlight


class GetFlightUseCase:
    def __init__(
        self,
        flight_query_repo: IFlightQueryRepo,
        result_cache: ResultCacheGateway,
        *,
        ttl_seconds: int = settings.FLIGHT_CACHE_TTL_SECONDS,
    ) -> None:
        self.flight_query_repo = flight_query_repo
        self.result_cache = result_cache
        self.ttl_seconds = ttl_seconds

    @classmethod
    @inject
    def depends(
        cls,
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        result_cache: ResultCacheGateway = Depends(Provide[Container.result_cache]),
    ) -> Self:
        return cls(flight_query_repo=flight_query_repo, result_cache=result_cache)

    @Logger.io
    async def get_by_id(self, *, flight_id: int, include_seats: bool = False) -> EnrichedFlight:
        """Enriched flight; the seat map is only built (and never cached) with include_seats."""
        cache_key = flight_cache_key(flight_id)
        if not include_seats:
            cached = await self.result_cache.get(cache_key)
            if cached is not None:
                return EnrichedFlight(**cached)

        aggregate = await self.flight_query_repo.get_flight_by_id(
            flight_id=flight_id, include_seats=include_seats
        )
        if aggregate is None:
            Logger.base.warning(f'⚠️ [GET_FLIGHT] Flight {flight_id} not found')
            raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')

        enriched = enrich_flight(aggregate.flight, aggregate.seats if include_seats else None)
        if not include_seats:
            await self.result_cache.set(cache_key, attrs.asdict(enriched), self.ttl_seconds)
        return enriched
