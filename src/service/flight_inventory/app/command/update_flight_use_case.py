"""
Update Flight Use Case

Partial update of a flight's schedule and commercial fields. Departure may only
move within the configured tolerance once bookings exist. The cached flight
detail is dropped after every successful write; cached search pages are left
to expire on their TTL.
"""

from datetime import timedelta
from typing import Any, Mapping, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.result_cache_gateway import ResultCacheGateway
from src.service.flight_inventory.domain.flight_lifecycle import (
    check_schedule_change,
    plan_flight_update,
    touches_schedule,
)
from src.service.flight_inventory.domain.search_cache_key import flight_cache_key
from src.service.flight_inventory.domain.search_planner import enrich_flight
from src.service.flight_inventory.domain.value_object.search_result import EnrichedFlight


class UpdateFlightUseCase:
    def __init__(
        self,
        flight_command_repo: IFlightCommandRepo,
        flight_query_repo: IFlightQueryRepo,
        result_cache: ResultCacheGateway,
        *,
        schedule_tolerance: Optional[timedelta] = None,
    ) -> None:
        self.flight_command_repo = flight_command_repo
        self.flight_query_repo = flight_query_repo
        self.result_cache = result_cache
        self.schedule_tolerance = schedule_tolerance or timedelta(
            hours=settings.SCHEDULE_CHANGE_TOLERANCE_HOURS
        )

    @classmethod
    @inject
    def depends(
        cls,
        flight_command_repo: IFlightCommandRepo = Depends(Provide[Container.flight_command_repo]),
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        result_cache: ResultCacheGateway = Depends(Provide[Container.result_cache]),
    ) -> Self:
        return cls(
            flight_command_repo=flight_command_repo,
            flight_query_repo=flight_query_repo,
            result_cache=result_cache,
        )

    @Logger.io
    async def update(self, *, flight_id: int, changes: Mapping[str, Any]) -> EnrichedFlight:
        current = await self.flight_query_repo.get_flight_by_id(flight_id=flight_id)
        if current is None:
            raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')

        planned = plan_flight_update(current.flight, changes)
        if touches_schedule(planned):
            booking_count = await self.flight_query_repo.count_bookings_for_flight(
                flight_id=flight_id
            )
            check_schedule_change(
                current.flight,
                new_departure=planned.get('departure_time'),
                new_arrival=planned.get('arrival_time'),
                booking_count=booking_count,
                tolerance=self.schedule_tolerance,
            )

        if planned:
            updated = await self.flight_command_repo.update_flight(
                flight_id=flight_id, changes=planned
            )
            if updated is None:
                raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')
            await self.result_cache.delete(flight_cache_key(flight_id))

        reloaded = await self.flight_query_repo.get_flight_by_id(flight_id=flight_id)
        if reloaded is None:
            raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')
        return enrich_flight(reloaded.flight)
