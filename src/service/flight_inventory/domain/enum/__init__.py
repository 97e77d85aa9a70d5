"""Flight Inventory Domain Enums"""

from src.service.flight_inventory.domain.enum.flight_status import FlightStatus
from src.service.flight_inventory.domain.enum.search_sort import SortBy, SortColumn, SortOrder
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.enum.seat_type import SeatType

__all__ = ['FlightStatus', 'SeatClass', 'SeatType', 'SortBy', 'SortColumn', 'SortOrder']
