from typing import Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.seat_layout_generator import group_seats_by_class


class ListAvailableSeatsUseCase:
    def __init__(self, flight_query_repo: IFlightQueryRepo) -> None:
        self.flight_query_repo = flight_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
    ) -> Self:
        return cls(flight_query_repo=flight_query_repo)

    @Logger.io
    async def get_available_seats(
        self, *, flight_id: int, seat_class: Optional[SeatClass] = None
    ) -> Dict[SeatClass, List[SeatEntity]]:
        """Bookable (available, unblocked) seats grouped by class, row/column ordered."""
        if await self.flight_query_repo.get_flight_by_id(flight_id=flight_id) is None:
            raise NotFoundError('Flight not found', code='FLIGHT_NOT_FOUND')

        seats = await self.flight_query_repo.find_seats(
            flight_id=flight_id, seat_class=seat_class, available_only=True
        )
        Logger.base.info(f'💺 [LIST_SEATS] Flight {flight_id}: {len(seats)} available')
        return group_seats_by_class(seats)
