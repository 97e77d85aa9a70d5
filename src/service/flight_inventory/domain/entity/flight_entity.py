from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.service.flight_inventory.domain.entity.airline_entity import AirlineEntity
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.airport_entity import AirportEntity
from src.service.flight_inventory.domain.entity.converters import (
    to_datetime,
    to_decimal,
    to_entity,
    to_optional_datetime,
)
from src.service.flight_inventory.domain.enum.flight_status import FlightStatus


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Flight {attribute.name} cannot be empty')


@attrs.define
class FlightEntity:
    flight_number: str = attrs.field(validator=_validate_non_empty_string)
    airline_id: int
    airplane_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: datetime = attrs.field(converter=to_datetime)
    arrival_time: datetime = attrs.field(converter=to_datetime)
    base_price: Decimal = attrs.field(converter=to_decimal)
    total_seats: int = 0
    available_seats: int = 0
    status: FlightStatus = attrs.field(default=FlightStatus.SCHEDULED, converter=FlightStatus)
    currency: str = 'USD'
    is_active: bool = True
    gate: Optional[str] = None
    terminal: Optional[str] = None
    delay_reason: Optional[str] = None
    estimated_departure_time: Optional[datetime] = attrs.field(
        default=None, converter=to_optional_datetime
    )
    estimated_arrival_time: Optional[datetime] = attrs.field(
        default=None, converter=to_optional_datetime
    )
    actual_departure_time: Optional[datetime] = attrs.field(
        default=None, converter=to_optional_datetime
    )
    actual_arrival_time: Optional[datetime] = attrs.field(
        default=None, converter=to_optional_datetime
    )
    notes: Optional[str] = None
    id: Optional[int] = None  # Only None before persistence

    # Read-side joins
    airline: Optional[AirlineEntity] = attrs.field(default=None, converter=to_entity(AirlineEntity))
    departure_airport: Optional[AirportEntity] = attrs.field(
        default=None, converter=to_entity(AirportEntity)
    )
    arrival_airport: Optional[AirportEntity] = attrs.field(
        default=None, converter=to_entity(AirportEntity)
    )
    airplane: Optional[AirplaneEntity] = attrs.field(
        default=None, converter=to_entity(AirplaneEntity)
    )
