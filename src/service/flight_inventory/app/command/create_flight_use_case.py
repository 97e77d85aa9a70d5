"""
Create Flight Use Case

Validates the new flight, then persists it together with its generated seat
map in a single repository transaction.

[Validation Order]
1. Route and times (same airports -> conflict, arrival before departure)
2. Base price
3. Airplane exists
4. Airplane seat configuration (before anything is written)
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InternalError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics
from src.service.flight_inventory.domain.entity.converters import ensure_utc
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.flight_lifecycle import (
    validate_base_price,
    validate_route_and_times,
)
from src.service.flight_inventory.domain.search_planner import enrich_flight
from src.service.flight_inventory.domain.seat_layout_generator import (
    generate_seats,
    resolve_seat_configuration,
)
from src.service.flight_inventory.domain.value_object.search_result import EnrichedFlight


class CreateFlightUseCase:
    def __init__(
        self,
        flight_command_repo: IFlightCommandRepo,
        flight_query_repo: IFlightQueryRepo,
        search_metrics: ISearchMetrics,
    ) -> None:
        self.flight_command_repo = flight_command_repo
        self.flight_query_repo = flight_query_repo
        self.search_metrics = search_metrics

    @classmethod
    @inject
    def depends(
        cls,
        flight_command_repo: IFlightCommandRepo = Depends(Provide[Container.flight_command_repo]),
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        search_metrics: ISearchMetrics = Depends(Provide[Container.search_metrics]),
    ) -> Self:
        return cls(
            flight_command_repo=flight_command_repo,
            flight_query_repo=flight_query_repo,
            search_metrics=search_metrics,
        )

    @Logger.io
    async def create(
        self,
        *,
        flight_number: str,
        airline_id: int,
        airplane_id: int,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_time: datetime,
        arrival_time: datetime,
        base_price: Decimal,
        currency: str = 'USD',
        gate: Optional[str] = None,
        terminal: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> EnrichedFlight:
        departure_time = ensure_utc(departure_time)
        arrival_time = ensure_utc(arrival_time)
        validate_route_and_times(
            departure_airport_id=departure_airport_id,
            arrival_airport_id=arrival_airport_id,
            departure_time=departure_time,
            arrival_time=arrival_time,
        )
        validate_base_price(base_price)

        airplane = await self.flight_query_repo.get_airplane_by_id(airplane_id=airplane_id)
        if airplane is None:
            raise NotFoundError('Airplane not found', code='AIRPLANE_NOT_FOUND')

        seat_count = sum(resolve_seat_configuration(airplane).values())

        flight = FlightEntity(
            flight_number=flight_number.strip(),
            airline_id=airline_id,
            airplane_id=airplane_id,
            departure_airport_id=departure_airport_id,
            arrival_airport_id=arrival_airport_id,
            departure_time=departure_time,
            arrival_time=arrival_time,
            base_price=base_price,
            total_seats=seat_count,
            available_seats=seat_count,
            currency=currency,
            gate=gate,
            terminal=terminal,
            notes=notes,
        )

        aggregate = await self.flight_command_repo.create_flight_with_seats(
            flight=flight,
            build_seats=lambda flight_id: generate_seats(flight_id, airplane),
        )
        created_id = aggregate.flight.id
        self.search_metrics.record_flight_created(seat_count=len(aggregate.seats or []))

        created = await self.flight_query_repo.get_flight_by_id(flight_id=created_id)
        if created is None:
            raise InternalError(f'Flight {created_id} vanished after creation')

        Logger.base.info(
            f'🛫 [CREATE_FLIGHT] {created.flight.flight_number} id={created_id} seats={seat_count}'
        )
        return enrich_flight(created.flight)
