"""
Seat Layout Generator

Deterministic seat-map synthesis for a flight from its airplane's per-class
configuration.

[Layout Rules]
- Classes are laid out in SEAT_CLASS_ORDER, occupying disjoint row ranges
- One row counter is shared across classes (row numbers never restart)
- business/first rows are 4 wide (A-D), every other class 6 wide (A-F)
- A class stops emitting seats once its own count is reached, even mid-row

[Seat Type]
Outermost columns are windows, the two columns straddling the row midpoint are
aisles, the rest are middles. Type depends only on column index and row width.
"""

from math import ceil
from typing import Dict, List, Mapping, Optional, Sequence

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_inventory.domain.entity.airplane_entity import AirplaneEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.seat_class import SEAT_CLASS_ORDER, SeatClass
from src.service.flight_inventory.domain.enum.seat_type import SeatType
from src.service.flight_inventory.domain.pricing_engine import seat_price


COLUMN_LETTERS = 'ABCDEF'
NARROW_ROW_CLASSES = frozenset({SeatClass.BUSINESS, SeatClass.FIRST})


def seats_per_row(seat_class: SeatClass) -> int:
    return 4 if seat_class in NARROW_ROW_CLASSES else 6


def seat_type_for(column_index: int, per_row: int) -> SeatType:
    if column_index in (0, per_row - 1):
        return SeatType.WINDOW
    if column_index in (per_row // 2 - 1, per_row // 2):
        return SeatType.AISLE
    return SeatType.MIDDLE


def resolve_seat_configuration(airplane: AirplaneEntity) -> Dict[SeatClass, int]:
    """
    Normalize the airplane's class -> count map.

    Absent (or all-zero) configuration means the whole cabin is economy.
    """
    raw: Optional[Mapping[str, int]] = airplane.seat_configuration
    if not raw or not any(raw.values()):
        return {SeatClass.ECONOMY: airplane.capacity}

    errors = []
    config: Dict[SeatClass, int] = {}
    for name, count in raw.items():
        try:
            seat_class = SeatClass.parse(name)
        except ValueError:
            errors.append(_config_error(f'Unknown seat class: {name}'))
            continue
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            errors.append(_config_error(f'Seat count for {name} must be a non-negative integer'))
            continue
        config[seat_class] = config.get(seat_class, 0) + count

    if not errors and sum(config.values()) > airplane.capacity:
        errors.append(
            _config_error(
                f'Seat configuration total {sum(config.values())} '
                f'exceeds airplane capacity {airplane.capacity}'
            )
        )
    if errors:
        raise ValidationError(
            'Invalid seat configuration', code='INVALID_SEAT_CONFIGURATION', errors=errors
        )
    return config


def generate_seats(flight_id: int, airplane: AirplaneEntity) -> List[SeatEntity]:
    config = resolve_seat_configuration(airplane)

    seats: List[SeatEntity] = []
    current_row = 1
    for seat_class in SEAT_CLASS_ORDER:
        count = config.get(seat_class, 0)
        if count <= 0:
            continue

        per_row = seats_per_row(seat_class)
        columns = COLUMN_LETTERS[:per_row]
        emitted = 0
        for _ in range(ceil(count / per_row)):
            for column_index, column in enumerate(columns):
                if emitted >= count:
                    break
                seat_type = seat_type_for(column_index, per_row)
                seats.append(
                    SeatEntity(
                        flight_id=flight_id,
                        seat_number=f'{current_row}{column}',
                        row=current_row,
                        column=column,
                        seat_class=seat_class,
                        seat_type=seat_type,
                        base_price=seat_price(seat_class, seat_type),
                    )
                )
                emitted += 1
            current_row += 1

    Logger.base.debug(
        f'[SEAT_LAYOUT] flight={flight_id} airplane={airplane.id} '
        f'seats={len(seats)} rows={current_row - 1}'
    )
    return seats


def group_seats_by_class(seats: Sequence[SeatEntity]) -> Dict[SeatClass, List[SeatEntity]]:
    """Partition seats into a seat map with one (possibly empty) list per class"""
    seat_map: Dict[SeatClass, List[SeatEntity]] = {
        seat_class: [] for seat_class in SEAT_CLASS_ORDER
    }
    for seat in seats:
        seat_map[seat.seat_class].append(seat)
    return seat_map


def _config_error(message: str) -> Dict[str, str]:
    return {
        'field': 'seat_configuration',
        'message': message,
        'code': 'INVALID_SEAT_CONFIGURATION',
    }
