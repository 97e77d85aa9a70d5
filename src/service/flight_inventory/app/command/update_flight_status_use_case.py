from datetime import datetime
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.clock import utc_now
from src.service.flight_inventory.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics
from src.service.flight_inventory.app.result_cache_gateway import ResultCacheGateway
from src.service.flight_inventory.domain.enum.flight_status import FlightStatus
from src.service.flight_inventory.domain.flight_lifecycle import plan_status_change
from src.service.flight_inventory.domain.search_cache_key import flight_cache_key
from src.service.flight_inventory.domain.search_planner import enrich_flight
from src.service.flight_inventory.domain.value_object.search_result import EnrichedFlight


class UpdateFlightStatusUseCase:
    def __init__(
        self,
        flight_command_repo: IFlightCommandRepo,
        flight_query_repo: IFlightQueryRepo,
        result_cache: ResultCacheGateway,
        search_metrics: ISearchMetrics,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.flight_command_repo = flight_command_repo
        self.flight_query_repo = flight_query_repo
        self.result_cache = result_cache
        self.search_metrics = search_metrics
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        flight_command_repo: IFlightCommandRepo = Depends(Provide[Container.flight_command_repo]),
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        result_cache: ResultCacheGateway = Depends(Provide[Container.result_cache]),
        search_metrics: ISearchMetrics = Depends(Provide[Container.search_metrics]),
    ) -> Self:
        return cls(
            flight_command_repo=flight_command_repo,
            flight_query_repo=flight_query_repo,
            result_cache=result_cache,
            search_metrics=search_metrics,
        )

    @Logger.io
    async def update_status(
        self, *, flight_id: int, status: FlightStatus, reason: Optional[str] = None
    ) -> EnrichedFlight:
        """Apply a status change; re-applying a terminal status is a no-op."""
        current = await self.flight_query_repo.get_flight_by_id(flight_id=flight_id)
        if current is None:
            raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')

        changes = plan_status_change(current.flight, status, reason, self.clock())
        if not changes:
            Logger.base.info(
                f'[FLIGHT_STATUS] Flight {flight_id} already {status.value}, nothing to do'
            )
            return enrich_flight(current.flight)

        await self.flight_command_repo.update_flight(flight_id=flight_id, changes=changes)
        await self.result_cache.delete(flight_cache_key(flight_id))
        self.search_metrics.record_status_change(status=status.value)
        Logger.base.info(
            f'🚦 [FLIGHT_STATUS] Flight {flight_id}: {current.flight.status.value} -> {status.value}'
        )

        reloaded = await self.flight_query_repo.get_flight_by_id(flight_id=flight_id)
        if reloaded is None:
            raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')
        return enrich_flight(reloaded.flight)
