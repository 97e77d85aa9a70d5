"""
Flight Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, List, Optional, Tuple

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.domain.aggregate.flight_aggregate import FlightAggregate
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.search_sort import SortColumn
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.value_object.search_plan import SearchPlan
from src.service.flight_inventory.driven_adapter.model import (
    AirlineModel,
    AirplaneModel,
    AirportModel,
    BookingModel,
    FlightModel,
    SeatModel,
)
from src.service.flight_inventory.driven_adapter.repo.flight_model_mapper import (
    model_to_airplane,
    model_to_flight,
    model_to_seat,
    to_utc,
)


class FlightQueryRepoImpl(IFlightQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _apply_plan_filters(stmt: Select[Any], plan: SearchPlan) -> Select[Any]:
        departure_airport = aliased(AirportModel)
        arrival_airport = aliased(AirportModel)
        stmt = (
            stmt.join(departure_airport, FlightModel.departure_airport_id == departure_airport.id)
            .join(arrival_airport, FlightModel.arrival_airport_id == arrival_airport.id)
            .join(AirlineModel, FlightModel.airline_id == AirlineModel.id)
        )

        conditions = [
            FlightModel.is_active.is_(True),
            FlightModel.status.in_([status.value for status in plan.statuses]),
            FlightModel.available_seats >= plan.min_available_seats,
        ]
        if plan.departure_range:
            conditions.append(
                FlightModel.departure_time.between(
                    to_utc(plan.departure_range.start), to_utc(plan.departure_range.end)
                )
            )
        if plan.max_price is not None:
            conditions.append(FlightModel.base_price <= plan.max_price)
        if plan.min_price is not None:
            conditions.append(FlightModel.base_price >= plan.min_price)
        if plan.departure_window:
            conditions.append(
                FlightModel.departure_time.between(
                    to_utc(plan.departure_window.start), to_utc(plan.departure_window.end)
                )
            )
        if plan.arrival_window:
            conditions.append(
                FlightModel.arrival_time.between(
                    to_utc(plan.arrival_window.start), to_utc(plan.arrival_window.end)
                )
            )
        if plan.origin:
            conditions.append(departure_airport.iata_code == plan.origin.upper())
        if plan.destination:
            conditions.append(arrival_airport.iata_code == plan.destination.upper())
        if plan.airline_codes:
            conditions.append(AirlineModel.code.in_(plan.airline_codes))

        return stmt.where(*conditions)

    @staticmethod
    def _order_column(sort_column: SortColumn) -> Any:
        return {
            SortColumn.BASE_PRICE: FlightModel.base_price,
            SortColumn.DEPARTURE_TIME: FlightModel.departure_time,
            SortColumn.ARRIVAL_TIME: FlightModel.arrival_time,
            SortColumn.AIRLINE_NAME: AirlineModel.name,
        }[sort_column]

    @Logger.io
    async def find_flights(self, *, plan: SearchPlan) -> Tuple[List[FlightEntity], int]:
        order_column = self._order_column(plan.sort_column)
        rows_stmt = (
            self._apply_plan_filters(select(FlightModel), plan)
            .order_by(
                order_column.desc() if plan.descending else order_column.asc(),
                FlightModel.id.asc(),
            )
            .limit(plan.limit)
            .offset(plan.offset)
        )
        count_stmt = self._apply_plan_filters(select(func.count(FlightModel.id)), plan)

        async with self._get_session() as session:
            total = (await session.execute(count_stmt)).scalar_one()
            result = await session.execute(rows_stmt)
            flights = [model_to_flight(model) for model in result.scalars().all()]

        Logger.base.info(f'[FIND_FLIGHTS] page rows={len(flights)} total={total}')
        return flights, total

    @Logger.io
    async def get_flight_by_id(
        self, *, flight_id: int, include_seats: bool = False
    ) -> Optional[FlightAggregate]:
        async with self._get_session() as session:
            result = await session.execute(select(FlightModel).where(FlightModel.id == flight_id))
            model = result.scalar_one_or_none()
            if model is None:
                return None

            seats = None
            if include_seats:
                seat_result = await session.execute(
                    select(SeatModel)
                    .where(SeatModel.flight_id == flight_id, SeatModel.is_available.is_(True))
                    .order_by(SeatModel.row, SeatModel.column)
                )
                seats = [model_to_seat(seat) for seat in seat_result.scalars().all()]

            return FlightAggregate(flight=model_to_flight(model), seats=seats)

    @Logger.io
    async def get_airplane_by_id(self, *, airplane_id: int) -> Optional[AirplaneEntity]:
        async with self._get_session() as session:
            model = await session.get(AirplaneModel, airplane_id)
            return model_to_airplane(model) if model is not None else None

    @Logger.io
    async def count_bookings_for_flight(self, *, flight_id: int) -> int:
        async with self._get_session() as session:
            result = await session.execute(
                select(func.count(BookingModel.id)).where(BookingModel.flight_id == flight_id)
            )
            return result.scalar_one()

    @Logger.io
    async def find_seats(
        self,
        *,
        flight_id: int,
        seat_class: Optional[SeatClass] = None,
        available_only: bool = True,
    ) -> List[SeatEntity]:
        stmt = select(SeatModel).where(SeatModel.flight_id == flight_id)
        if available_only:
            stmt = stmt.where(SeatModel.is_available.is_(True), SeatModel.is_blocked.is_(False))
        if seat_class is not None:
            stmt = stmt.where(SeatModel.seat_class == seat_class.value)

        async with self._get_session() as session:
            result = await session.execute(stmt.order_by(SeatModel.row, SeatModel.column))
            return [model_to_seat(model) for model in result.scalars().all()]
