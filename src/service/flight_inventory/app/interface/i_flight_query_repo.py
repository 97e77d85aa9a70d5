"""
Flight Query Repository Interface

Read side of the flight inventory store
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.service.flight_inventory.domain.aggregate.flight_aggregate import FlightAggregate
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.value_object.search_plan import SearchPlan


class IFlightQueryRepo(ABC):
    @abstractmethod
    async def find_flights(self, *, plan: SearchPlan) -> Tuple[List[FlightEntity], int]:
        """One page of matching flights (with joined summaries) and the total match count."""
        pass

    @abstractmethod
    async def get_flight_by_id(
        self, *, flight_id: int, include_seats: bool = False
    ) -> Optional[FlightAggregate]:
        """Flight with joins; seats holds the available seats when include_seats is set."""
        pass

    @abstractmethod
    async def get_airplane_by_id(self, *, airplane_id: int) -> Optional[AirplaneEntity]:
        pass

    @abstractmethod
    async def count_bookings_for_flight(self, *, flight_id: int) -> int:
        pass

    @abstractmethod
    async def find_seats(
        self,
        *,
        flight_id: int,
        seat_class: Optional[SeatClass] = None,
        available_only: bool = True,
    ) -> List[SeatEntity]:
        """
        Seats ordered by row then column.

        available_only keeps seats that are available and not blocked.
        """
        pass
