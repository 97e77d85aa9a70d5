from datetime import date
from typing import Dict, List, Optional

import attrs
from fastapi import APIRouter, Depends, Query, status

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.command.create_flight_use_case import CreateFlightUseCase
from src.service.flight_inventory.app.command.update_flight_status_use_case import (
    UpdateFlightStatusUseCase,
)
from src.service.flight_inventory.app.command.update_flight_use_case import UpdateFlightUseCase
from src.service.flight_inventory.app.query.get_flight_use_case import GetFlightUseCase
from src.service.flight_inventory.app.query.list_available_seats_use_case import (
    ListAvailableSeatsUseCase,
)
from src.service.flight_inventory.app.query.search_flights_use_case import (
    ROUTE_DEFAULT_LIMIT,
    SearchFlightsUseCase,
)
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.value_object.search_query import SearchQuery
from src.service.flight_inventory.domain.value_object.search_result import (
    EnrichedFlight,
    SearchResult,
)
from src.service.flight_inventory.driving_adapter.schema.flight_schema import (
    EnrichedFlightResponse,
    FlightCreateRequest,
    FlightStatusUpdateRequest,
    FlightUpdateRequest,
    SearchResultResponse,
    SeatResponse,
)


router = APIRouter()


def _search_response(result: SearchResult) -> SearchResultResponse:
    return SearchResultResponse.model_validate(attrs.asdict(result))


def _flight_response(enriched: EnrichedFlight) -> EnrichedFlightResponse:
    return EnrichedFlightResponse.model_validate(attrs.asdict(enriched))


# ============================ Search Endpoints ============================


@router.get('/search', status_code=status.HTTP_200_OK)
@Logger.io
async def search_flights(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    departure_date: Optional[str] = None,
    return_date: Optional[str] = None,
    passengers: Optional[str] = None,
    flight_class: Optional[str] = Query(default=None, alias='class'),
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    preferred_airlines: Optional[str] = None,
    max_stops: Optional[str] = None,
    departure_time_range: Optional[str] = None,
    arrival_time_range: Optional[str] = None,
    use_case: SearchFlightsUseCase = Depends(SearchFlightsUseCase.depends),
) -> SearchResultResponse:
    """Raw strings go straight to SearchQuery so every bad field is reported at once."""
    query = SearchQuery.from_params(
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        return_date=return_date,
        passengers=passengers,
        flight_class=flight_class,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        min_price=min_price,
        max_price=max_price,
        preferred_airlines=preferred_airlines,
        max_stops=max_stops,
        departure_time_range=departure_time_range,
        arrival_time_range=arrival_time_range,
    )
    result = await use_case.search(query=query)
    return _search_response(result)


@router.get('/route/{origin}/{destination}', status_code=status.HTTP_200_OK)
@Logger.io
async def search_by_route(
    origin: str,
    destination: str,
    start_date: Optional[date] = Query(default=None, alias='date'),
    limit: int = Query(default=ROUTE_DEFAULT_LIMIT, ge=1),
    use_case: SearchFlightsUseCase = Depends(SearchFlightsUseCase.depends),
) -> SearchResultResponse:
    result = await use_case.search_by_route(
        origin=origin, destination=destination, start_date=start_date, limit=limit
    )
    return _search_response(result)


# ============================ Flight Endpoints ============================


@router.get('/{flight_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_flight(
    flight_id: int,
    include_seats: bool = False,
    use_case: GetFlightUseCase = Depends(GetFlightUseCase.depends),
) -> EnrichedFlightResponse:
    enriched = await use_case.get_by_id(flight_id=flight_id, include_seats=include_seats)
    return _flight_response(enriched)


@router.get('/{flight_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def list_available_seats(
    flight_id: int,
    seat_class: Optional[str] = None,
    use_case: ListAvailableSeatsUseCase = Depends(ListAvailableSeatsUseCase.depends),
) -> Dict[SeatClass, List[SeatResponse]]:
    parsed_class = None
    if seat_class:
        try:
            parsed_class = SeatClass.parse(seat_class)
        except ValueError as e:
            raise ValidationError.for_field(
                'seat_class', 'Invalid seat class', 'INVALID_VALUE'
            ) from e

    seat_map = await use_case.get_available_seats(flight_id=flight_id, seat_class=parsed_class)
    return {
        seat_class_key: [SeatResponse.model_validate(attrs.asdict(seat)) for seat in seats]
        for seat_class_key, seats in seat_map.items()
    }


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_flight(
    request: FlightCreateRequest,
    use_case: CreateFlightUseCase = Depends(CreateFlightUseCase.depends),
) -> EnrichedFlightResponse:
    enriched = await use_case.create(**request.model_dump())
    return _flight_response(enriched)


@router.patch('/{flight_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_flight(
    flight_id: int,
    request: FlightUpdateRequest,
    use_case: UpdateFlightUseCase = Depends(UpdateFlightUseCase.depends),
) -> EnrichedFlightResponse:
    # Explicit nulls are ignored, not written as NULL
    changes = request.model_dump(exclude_none=True)
    enriched = await use_case.update(flight_id=flight_id, changes=changes)
    return _flight_response(enriched)


@router.patch('/{flight_id}/status', status_code=status.HTTP_200_OK)
@Logger.io
async def update_flight_status(
    flight_id: int,
    request: FlightStatusUpdateRequest,
    use_case: UpdateFlightStatusUseCase = Depends(UpdateFlightStatusUseCase.depends),
) -> EnrichedFlightResponse:
    enriched = await use_case.update_status(
        flight_id=flight_id, status=request.status, reason=request.reason
    )
    return _flight_response(enriched)
