from typing import List, Optional

import attrs

from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity


@attrs.define
class FlightAggregate:
    """Flight with (optionally) its seats; seats is None when not loaded"""

    flight: FlightEntity
    seats: Optional[List[SeatEntity]] = None
