"""
Flight Command Repository Implementation - CQRS Write Side

A flight and its seats are written in one transaction: the flight row is
flushed first to obtain its id, the seats are built for that id and bulk
inserted, and only then is the transaction committed.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from enum import Enum
from typing import Any, AsyncContextManager, AsyncIterator, Callable, List, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_inventory.domain.aggregate.flight_aggregate import FlightAggregate
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.driven_adapter.model import FlightModel
from src.service.flight_inventory.driven_adapter.repo.flight_model_mapper import (
    flight_to_model,
    model_to_flight,
    model_to_seat,
    seat_to_model,
    to_utc,
)


class FlightCommandRepoImpl(IFlightCommandRepo):
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

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        async with self._get_session() as session:
            if session.in_transaction():
                async with session.begin_nested():
                    yield session
            else:
                async with session.begin():
                    yield session

    @Logger.io
    async def create_flight_with_seats(
        self,
        *,
        flight: FlightEntity,
        build_seats: Callable[[int], List[SeatEntity]],
    ) -> FlightAggregate:
        async with self._transaction() as session:
            flight_model = flight_to_model(flight)
            session.add(flight_model)
            await session.flush()

            seats = build_seats(flight_model.id)
            seat_models = [seat_to_model(seat, flight_id=flight_model.id) for seat in seats]
            session.add_all(seat_models)
            await session.flush()

            aggregate = FlightAggregate(
                flight=model_to_flight(flight_model, with_joins=False),
                seats=[model_to_seat(model) for model in seat_models],
            )

        Logger.base.info(
            f'🛫 [CREATE_FLIGHT] Created flight {aggregate.flight.id} '
            f'({aggregate.flight.flight_number}) with {len(seat_models)} seats'
        )
        return aggregate

    @Logger.io
    async def update_flight(
        self, *, flight_id: int, changes: Mapping[str, Any]
    ) -> Optional[FlightEntity]:
        async with self._transaction() as session:
            model = await session.get(FlightModel, flight_id)
            if model is None:
                return None

            for name, value in changes.items():
                if isinstance(value, datetime):
                    value = to_utc(value)
                elif isinstance(value, Enum):
                    value = value.value
                setattr(model, name, value)
            await session.flush()

            flight = model_to_flight(model, with_joins=False)

        Logger.base.info(f'✏️ [UPDATE_FLIGHT] Updated flight {flight_id}: {sorted(changes)}')
        return flight
