"""
Search Planner

Pure translation of a SearchQuery into a SearchPlan for the repository, plus
enrichment of result rows with duration, class pricing and availability.

Day boundaries and hour-of-day windows are evaluated in one reference
timezone (server local time unless configured). Hour-of-day windows are
anchored on *today* in that timezone, not on the flight's own date.
"""

from datetime import date, datetime, time, tzinfo
from math import ceil
from typing import Dict, Optional, Sequence
from zoneinfo import ZoneInfo

from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.flight_status import SEARCHABLE_STATUSES
from src.service.flight_inventory.domain.enum.search_sort import SortBy, SortColumn, SortOrder
from src.service.flight_inventory.domain.pricing_engine import (
    availability,
    class_pricing,
    duration_minutes,
    format_duration,
)
from src.service.flight_inventory.domain.seat_layout_generator import group_seats_by_class
from src.service.flight_inventory.domain.value_object.search_plan import DateTimeRange, SearchPlan
from src.service.flight_inventory.domain.value_object.search_query import SearchQuery, TimeWindow
from src.service.flight_inventory.domain.value_object.search_result import (
    EnrichedFlight,
    Pagination,
    SearchFilters,
    SearchResult,
)


# duration is not a stored column; it orders like departure
SORT_COLUMNS: Dict[SortBy, SortColumn] = {
    SortBy.PRICE: SortColumn.BASE_PRICE,
    SortBy.DURATION: SortColumn.DEPARTURE_TIME,
    SortBy.DEPARTURE: SortColumn.DEPARTURE_TIME,
    SortBy.ARRIVAL: SortColumn.ARRIVAL_TIME,
    SortBy.AIRLINE: SortColumn.AIRLINE_NAME,
}


def resolve_reference_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """None stands for server local time, resolved per date so DST shifts apply"""
    return ZoneInfo(name) if name else None


def localize(day: date, at: time, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        return datetime.combine(day, at).astimezone()
    return datetime.combine(day, at, tzinfo=tz)


def day_range(day: date, tz: Optional[tzinfo]) -> DateTimeRange:
    return DateTimeRange(start=localize(day, time.min, tz), end=localize(day, time.max, tz))


def hour_window(window: TimeWindow, today: date, tz: Optional[tzinfo]) -> DateTimeRange:
    return DateTimeRange(
        start=localize(today, time(window.start), tz),
        end=localize(today, time(window.end, 59, 59, 999999), tz),
    )


def resolve_sort(sort_by: str, sort_order: SortOrder) -> tuple[SortColumn, bool]:
    try:
        column = SORT_COLUMNS[SortBy(sort_by)]
    except ValueError:
        # Unknown keys always fall back to departure ascending
        return SortColumn.DEPARTURE_TIME, False
    return column, sort_order == SortOrder.DESC


def build_search_plan(
    query: SearchQuery, *, reference_tz: Optional[tzinfo], now: datetime
) -> SearchPlan:
    today = now.astimezone(reference_tz).date()
    sort_column, descending = resolve_sort(query.sort_by, query.sort_order)

    return SearchPlan(
        min_available_seats=query.passengers,
        statuses=SEARCHABLE_STATUSES,
        sort_column=sort_column,
        descending=descending,
        limit=query.limit,
        offset=query.offset,
        origin=query.origin,
        destination=query.destination,
        departure_range=(
            day_range(query.departure_date, reference_tz) if query.departure_date else None
        ),
        min_price=query.min_price,
        max_price=query.max_price,
        departure_window=(
            hour_window(query.departure_time_range, today, reference_tz)
            if query.departure_time_range
            else None
        ),
        arrival_window=(
            hour_window(query.arrival_time_range, today, reference_tz)
            if query.arrival_time_range
            else None
        ),
        airline_codes=query.preferred_airlines,
    )


def enrich_flight(
    flight: FlightEntity, seats: Optional[Sequence[SeatEntity]] = None
) -> EnrichedFlight:
    minutes = duration_minutes(flight.departure_time, flight.arrival_time)
    return EnrichedFlight(
        flight=flight,
        duration=minutes,
        formatted_duration=format_duration(minutes),
        pricing=class_pricing(flight.base_price),
        availability=availability(flight.total_seats, flight.available_seats),
        seat_map=group_seats_by_class(seats) if seats is not None else None,
    )


def build_search_result(
    query: SearchQuery, flights: Sequence[FlightEntity], total: int
) -> SearchResult:
    return SearchResult(
        flights=[enrich_flight(flight) for flight in flights],
        pagination=Pagination(
            page=query.page,
            limit=query.limit,
            total=total,
            pages=ceil(total / query.limit),
        ),
        filters=SearchFilters(
            origin=query.origin,
            destination=query.destination,
            departure_date=query.departure_date,
            passengers=query.passengers,
            flight_class=query.flight_class,
        ),
    )
