from decimal import Decimal
from typing import Optional

import attrs

from src.service.flight_inventory.domain.entity.converters import to_decimal
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.enum.seat_type import SeatType


@attrs.define
class SeatEntity:
    flight_id: int
    seat_number: str
    row: int
    column: str
    seat_class: SeatClass = attrs.field(converter=SeatClass)
    seat_type: SeatType = attrs.field(converter=SeatType)
    base_price: Decimal = attrs.field(converter=to_decimal)
    is_available: bool = True
    is_blocked: bool = False
    id: Optional[int] = None
