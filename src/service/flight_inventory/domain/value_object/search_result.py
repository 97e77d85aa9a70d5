"""
Search result value objects.

Ephemeral: never persisted, only returned and cached. Every field carries a
converter so `SearchResult(**orjson.loads(...))` rebuilds the full tree.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

import attrs

from src.service.flight_inventory.domain.entity.converters import (
    to_decimal,
    to_entity,
    to_entity_list,
    to_optional_date,
)
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.seat_class import SeatClass


def _to_pricing(value: Dict[Any, Any]) -> Dict[SeatClass, Decimal]:
    return {SeatClass(k): to_decimal(v) for k, v in value.items()}


def _to_seat_map(value: Optional[Dict[Any, Any]]) -> Optional[Dict[SeatClass, List[SeatEntity]]]:
    if value is None:
        return None
    convert = to_entity_list(SeatEntity)
    return {SeatClass(k): convert(seats) for k, seats in value.items()}


@attrs.define(frozen=True)
class Availability:
    total: int
    available: int
    percentage: int


@attrs.define(frozen=True)
class EnrichedFlight:
    flight: FlightEntity = attrs.field(converter=to_entity(FlightEntity))
    duration: int
    formatted_duration: str
    pricing: Dict[SeatClass, Decimal] = attrs.field(converter=_to_pricing)
    availability: Availability = attrs.field(converter=to_entity(Availability))
    seat_map: Optional[Dict[SeatClass, List[SeatEntity]]] = attrs.field(
        default=None, converter=_to_seat_map
    )


@attrs.define(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    pages: int


@attrs.define(frozen=True)
class SearchFilters:
    """Echo of the criteria that produced the page"""

    origin: Optional[str]
    destination: Optional[str]
    departure_date: Optional[date] = attrs.field(converter=to_optional_date)
    passengers: int
    flight_class: SeatClass = attrs.field(converter=SeatClass)


@attrs.define(frozen=True)
class SearchResult:
    flights: List[EnrichedFlight] = attrs.field(converter=to_entity_list(EnrichedFlight))
    pagination: Pagination = attrs.field(converter=to_entity(Pagination))
    filters: SearchFilters = attrs.field(converter=to_entity(SearchFilters))
