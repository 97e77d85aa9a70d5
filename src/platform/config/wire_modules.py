"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.flight_inventory.app.command import (
    create_flight_use_case,
    update_flight_status_use_case,
    update_flight_use_case,
)
from src.service.flight_inventory.app.query import (
    get_flight_use_case,
    list_available_seats_use_case,
    search_flights_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    search_flights_use_case,
    get_flight_use_case,
    list_available_seats_use_case,
    create_flight_use_case,
    update_flight_use_case,
    update_flight_status_use_case,
]
