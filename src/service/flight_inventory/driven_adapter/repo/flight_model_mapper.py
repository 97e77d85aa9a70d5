"""Model <-> entity mapping shared by the flight repositories"""

from datetime import UTC, datetime
from typing import Optional

from src.service.flight_inventory.domain.entity.airline_entity import AirlineEntity
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.airport_entity import AirportEntity
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.driven_adapter.model.airline_model import AirlineModel
from src.service.flight_inventory.driven_adapter.model.airplane_model import AirplaneModel
from src.service.flight_inventory.driven_adapter.model.airport_model import AirportModel
from src.service.flight_inventory.driven_adapter.model.flight_model import FlightModel
from src.service.flight_inventory.driven_adapter.model.seat_model import SeatModel


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are bound as UTC so drivers without tz support compare correctly"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def model_to_airline(model: AirlineModel) -> AirlineEntity:
    return AirlineEntity(id=model.id, name=model.name, code=model.code, country=model.country)


def model_to_airport(model: AirportModel) -> AirportEntity:
    return AirportEntity(
        id=model.id,
        name=model.name,
        iata_code=model.iata_code,
        city=model.city,
        country=model.country,
        timezone=model.timezone,
    )


def model_to_airplane(model: AirplaneModel) -> AirplaneEntity:
    return AirplaneEntity(
        id=model.id,
        airline_id=model.airline_id,
        model_number=model.model_number,
        manufacturer=model.manufacturer,
        model=model.model,
        capacity=model.capacity,
        seat_configuration=model.seat_configuration,
    )


def model_to_flight(model: FlightModel, *, with_joins: bool = True) -> FlightEntity:
    """with_joins=False must be used on freshly written rows (relationships not loaded)"""
    return FlightEntity(
        id=model.id,
        flight_number=model.flight_number,
        airline_id=model.airline_id,
        airplane_id=model.airplane_id,
        departure_airport_id=model.departure_airport_id,
        arrival_airport_id=model.arrival_airport_id,
        departure_time=model.departure_time,
        arrival_time=model.arrival_time,
        base_price=model.base_price,
        currency=model.currency,
        total_seats=model.total_seats,
        available_seats=model.available_seats,
        status=model.status,
        is_active=model.is_active,
        gate=model.gate,
        terminal=model.terminal,
        delay_reason=model.delay_reason,
        estimated_departure_time=model.estimated_departure_time,
        estimated_arrival_time=model.estimated_arrival_time,
        actual_departure_time=model.actual_departure_time,
        actual_arrival_time=model.actual_arrival_time,
        notes=model.notes,
        airline=model_to_airline(model.airline) if with_joins else None,
        departure_airport=model_to_airport(model.departure_airport) if with_joins else None,
        arrival_airport=model_to_airport(model.arrival_airport) if with_joins else None,
        airplane=model_to_airplane(model.airplane) if with_joins else None,
    )


def flight_to_model(flight: FlightEntity) -> FlightModel:
    return FlightModel(
        flight_number=flight.flight_number,
        airline_id=flight.airline_id,
        airplane_id=flight.airplane_id,
        departure_airport_id=flight.departure_airport_id,
        arrival_airport_id=flight.arrival_airport_id,
        departure_time=to_utc(flight.departure_time),
        arrival_time=to_utc(flight.arrival_time),
        base_price=flight.base_price,
        currency=flight.currency,
        total_seats=flight.total_seats,
        available_seats=flight.available_seats,
        status=flight.status.value,
        is_active=flight.is_active,
        gate=flight.gate,
        terminal=flight.terminal,
        delay_reason=flight.delay_reason,
        estimated_departure_time=to_utc(flight.estimated_departure_time),
        estimated_arrival_time=to_utc(flight.estimated_arrival_time),
        notes=flight.notes,
    )


def model_to_seat(model: SeatModel) -> SeatEntity:
    return SeatEntity(
        id=model.id,
        flight_id=model.flight_id,
        seat_number=model.seat_number,
        row=model.row,
        column=model.column,
        seat_class=model.seat_class,
        seat_type=model.seat_type,
        is_available=model.is_available,
        is_blocked=model.is_blocked,
        base_price=model.base_price,
    )


def seat_to_model(seat: SeatEntity, *, flight_id: int) -> SeatModel:
    return SeatModel(
        flight_id=flight_id,
        seat_number=seat.seat_number,
        row=seat.row,
        column=seat.column,
        seat_class=seat.seat_class.value,
        seat_type=seat.seat_type.value,
        is_available=seat.is_available,
        is_blocked=seat.is_blocked,
        base_price=seat.base_price,
    )
