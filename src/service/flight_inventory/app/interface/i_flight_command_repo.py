"""
Flight Command Repository Interface

Write side of the flight inventory store
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional

from src.service.flight_inventory.domain.aggregate.flight_aggregate import FlightAggregate
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity


class IFlightCommandRepo(ABC):
    @abstractmethod
    async def create_flight_with_seats(
        self,
        *,
        flight: FlightEntity,
        build_seats: Callable[[int], List[SeatEntity]],
    ) -> FlightAggregate:
        """
        Insert the flight, then the seats built for its new id, in one transaction.

        If seat building or the bulk insert fails nothing is committed.
        """
        pass

    @abstractmethod
    async def update_flight(
        self, *, flight_id: int, changes: Mapping[str, Any]
    ) -> Optional[FlightEntity]:
        """Apply column changes; None when the flight does not exist."""
        pass
