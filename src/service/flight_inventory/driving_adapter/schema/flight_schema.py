from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.service.flight_inventory.domain.enum.flight_status import FlightStatus
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.enum.seat_type import SeatType


_FLIGHT_EXAMPLE = {
    'flight_number': 'BR12',
    'airline_id': 1,
    'airplane_id': 3,
    'departure_airport_id': 1,
    'arrival_airport_id': 2,
    'departure_time': '2026-11-02T08:30:00Z',
    'arrival_time': '2026-11-02T11:45:00Z',
    'base_price': '320.00',
    'currency': 'USD',
    'gate': 'B7',
    'terminal': '2',
}


class FlightCreateRequest(BaseModel):
    flight_number: str = Field(min_length=1, max_length=10)
    airline_id: int
    airplane_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: datetime
    arrival_time: datetime
    base_price: Decimal = Field(decimal_places=2)
    currency: str = Field(default='USD', min_length=3, max_length=3)
    gate: Optional[str] = None
    terminal: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {'example': _FLIGHT_EXAMPLE}


class FlightUpdateRequest(BaseModel):
    flight_number: Optional[str] = Field(default=None, min_length=1, max_length=10)
    airline_id: Optional[int] = None
    departure_airport_id: Optional[int] = None
    arrival_airport_id: Optional[int] = None
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None
    base_price: Optional[Decimal] = Field(default=None, decimal_places=2)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    gate: Optional[str] = None
    terminal: Optional[str] = None
    estimated_departure_time: Optional[datetime] = None
    estimated_arrival_time: Optional[datetime] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        json_schema_extra = {
            'example': {
                'departure_time': '2026-11-02T09:30:00Z',
                'arrival_time': '2026-11-02T12:45:00Z',
                'gate': 'C3',
            }
        }


class FlightStatusUpdateRequest(BaseModel):
    status: FlightStatus
    reason: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'status': 'delayed', 'reason': 'Weather at destination'}}


class AirlineSummary(BaseModel):
    id: int
    name: str
    code: str
    country: Optional[str] = None


class AirportSummary(BaseModel):
    id: int
    name: str
    iata_code: str
    city: str
    country: str
    timezone: Optional[str] = None


class AirplaneSummary(BaseModel):
    id: int
    model_number: str
    capacity: int
    airline_id: Optional[int] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None


class FlightResponse(BaseModel):
    id: int
    flight_number: str
    airline_id: int
    airplane_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: datetime
    arrival_time: datetime
    status: FlightStatus
    base_price: Decimal
    currency: str
    total_seats: int
    available_seats: int
    is_active: bool
    gate: Optional[str] = None
    terminal: Optional[str] = None
    delay_reason: Optional[str] = None
    estimated_departure_time: Optional[datetime] = None
    estimated_arrival_time: Optional[datetime] = None
    actual_departure_time: Optional[datetime] = None
    actual_arrival_time: Optional[datetime] = None
    notes: Optional[str] = None
    airline: Optional[AirlineSummary] = None
    departure_airport: Optional[AirportSummary] = None
    arrival_airport: Optional[AirportSummary] = None
    airplane: Optional[AirplaneSummary] = None


class SeatResponse(BaseModel):
    id: Optional[int] = None
    flight_id: int
    seat_number: str
    row: int
    column: str
    seat_class: SeatClass
    seat_type: SeatType
    base_price: Decimal
    is_available: bool
    is_blocked: bool

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'flight_id': 1,
                'seat_number': '1A',
                'row': 1,
                'column': 'A',
                'seat_class': 'business',
                'seat_type': 'window',
                'base_price': '120.00',
                'is_available': True,
                'is_blocked': False,
            }
        }


class AvailabilityResponse(BaseModel):
    total: int
    available: int
    percentage: int


class EnrichedFlightResponse(BaseModel):
    flight: FlightResponse
    duration: int
    formatted_duration: str
    pricing: Dict[SeatClass, Decimal]
    availability: AvailabilityResponse
    seat_map: Optional[Dict[SeatClass, List[SeatResponse]]] = None

    class Config:
        json_schema_extra = {
            'example': {
                'flight': {**_FLIGHT_EXAMPLE, 'id': 1, 'status': 'scheduled'},
                'duration': 195,
                'formatted_duration': '3h 15m',
                'pricing': {
                    'economy': '320.00',
                    'premium-economy': '416.00',
                    'business': '800.00',
                    'first': '1280.00',
                },
                'availability': {'total': 180, 'available': 171, 'percentage': 95},
            }
        }


class PaginationResponse(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class SearchFiltersResponse(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    departure_date: Optional[date] = None
    passengers: int
    flight_class: SeatClass


class SearchResultResponse(BaseModel):
    flights: List[EnrichedFlightResponse]
    pagination: PaginationResponse
    filters: SearchFiltersResponse
