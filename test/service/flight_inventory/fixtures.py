"""
Flight Inventory test helpers

Entity builders for unit tests and seed helpers that write reference rows
(airlines, airports, airplanes, flights, seats, bookings) for integration tests.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, Iterable

from src.platform.database.db_setting import Database
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.enum.flight_status import FlightStatus
from src.service.flight_inventory.driven_adapter.model import (
    AirlineModel,
    AirplaneModel,
    AirportModel,
    BookingModel,
    FlightModel,
)


DEPARTURE = datetime(2024, 6, 1, 8, 0, tzinfo=UTC)
ARRIVAL = datetime(2024, 6, 1, 14, 15, tzinfo=UTC)


def make_flight(**overrides: Any) -> FlightEntity:
    values: Dict[str, Any] = {
        'id': 1,
        'flight_number': 'AA100',
        'airline_id': 1,
        'airplane_id': 1,
        'departure_airport_id': 1,
        'arrival_airport_id': 2,
        'departure_time': DEPARTURE,
        'arrival_time': ARRIVAL,
        'base_price': Decimal('200.00'),
        'total_seats': 180,
        'available_seats': 90,
    }
    values.update(overrides)
    return FlightEntity(**values)


def make_airplane(**overrides: Any) -> AirplaneEntity:
    values: Dict[str, Any] = {
        'id': 1,
        'model_number': 'A320-200',
        'capacity': 180,
        'airline_id': 1,
        'seat_configuration': {'economy': 150, 'business': 30},
    }
    values.update(overrides)
    return AirplaneEntity(**values)


async def seed_reference_data() -> Dict[str, int]:
    """Two airlines, three airports (JFK, LAX, SFO) and two airplanes."""
    async with Database().session() as session:
        american = AirlineModel(name='American Airlines', code='AA', country='US')
        delta = AirlineModel(name='Delta Air Lines', code='DL', country='US')
        jfk = AirportModel(
            name='John F. Kennedy International',
            iata_code='JFK',
            city='New York',
            country='US',
            timezone='America/New_York',
        )
        lax = AirportModel(
            name='Los Angeles International',
            iata_code='LAX',
            city='Los Angeles',
            country='US',
            timezone='America/Los_Angeles',
        )
        sfo = AirportModel(
            name='San Francisco International',
            iata_code='SFO',
            city='San Francisco',
            country='US',
            timezone='America/Los_Angeles',
        )
        session.add_all([american, delta, jfk, lax, sfo])
        await session.flush()

        small_jet = AirplaneModel(
            airline_id=american.id,
            model_number='E175',
            manufacturer='Embraer',
            model='175',
            capacity=16,
            seat_configuration={'economy': 12, 'business': 4},
        )
        narrow_body = AirplaneModel(
            airline_id=delta.id,
            model_number='A320-200',
            manufacturer='Airbus',
            model='A320',
            capacity=30,
            seat_configuration=None,
        )
        session.add_all([small_jet, narrow_body])
        await session.commit()

        return {
            'american': american.id,
            'delta': delta.id,
            'jfk': jfk.id,
            'lax': lax.id,
            'sfo': sfo.id,
            'small_jet': small_jet.id,
            'narrow_body': narrow_body.id,
        }


async def seed_flights(rows: Iterable[Dict[str, Any]]) -> list[int]:
    """Insert flight rows directly (no seats), returning their ids in order."""
    async with Database().session() as session:
        models = [FlightModel(**_flight_row(row)) for row in rows]
        session.add_all(models)
        await session.commit()
        return [model.id for model in models]


async def seed_bookings(flight_id: int, count: int) -> None:
    async with Database().session() as session:
        session.add_all(
            [BookingModel(flight_id=flight_id, status='confirmed') for _ in range(count)]
        )
        await session.commit()


def flight_row(
    ids: Dict[str, int],
    *,
    flight_number: str = 'AA100',
    airline: str = 'american',
    origin: str = 'jfk',
    destination: str = 'lax',
    departure: datetime = DEPARTURE,
    duration: timedelta = timedelta(hours=6, minutes=15),
    base_price: str = '200.00',
    total_seats: int = 16,
    available_seats: int = 16,
    status: FlightStatus = FlightStatus.SCHEDULED,
    is_active: bool = True,
    airplane: str = 'small_jet',
) -> Dict[str, Any]:
    return {
        'flight_number': flight_number,
        'airline_id': ids[airline],
        'airplane_id': ids[airplane],
        'departure_airport_id': ids[origin],
        'arrival_airport_id': ids[destination],
        'departure_time': departure,
        'arrival_time': departure + duration,
        'base_price': Decimal(base_price),
        'total_seats': total_seats,
        'available_seats': available_seats,
        'status': status,
        'is_active': is_active,
    }


def _flight_row(row: Dict[str, Any]) -> Dict[str, Any]:
    values = dict(row)
    values['status'] = FlightStatus(values['status']).value
    return values
