"""Flight Inventory Domain Entities"""

from src.service.flight_inventory.domain.entity.airline_entity import AirlineEntity
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.airport_entity import AirportEntity
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity

__all__ = ['AirlineEntity', 'AirplaneEntity', 'AirportEntity', 'FlightEntity', 'SeatEntity']
