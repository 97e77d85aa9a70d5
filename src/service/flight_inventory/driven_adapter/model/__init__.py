"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.flight_inventory.driven_adapter.model.airline_model import AirlineModel
from src.service.flight_inventory.driven_adapter.model.airplane_model import AirplaneModel
from src.service.flight_inventory.driven_adapter.model.airport_model import AirportModel
from src.service.flight_inventory.driven_adapter.model.booking_model import BookingModel
from src.service.flight_inventory.driven_adapter.model.flight_model import FlightModel
from src.service.flight_inventory.driven_adapter.model.seat_model import SeatModel

__all__ = [
    'AirlineModel',
    'AirplaneModel',
    'AirportModel',
    'BookingModel',
    'FlightModel',
    'SeatModel',
]
