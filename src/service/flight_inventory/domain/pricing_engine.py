"""
Pricing Engine

Per-class fares derived from a flight's base price, per-seat surcharges derived
from seat class/type, and flight duration helpers. All money is Decimal,
rounded half-up to cents.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
import re
from typing import Dict, Tuple

from src.platform.exception.exceptions import ValidationError
from src.service.flight_inventory.domain.enum.seat_class import SEAT_CLASS_ORDER, SeatClass
from src.service.flight_inventory.domain.enum.seat_type import SeatType
from src.service.flight_inventory.domain.value_object.search_result import Availability


CENT = Decimal('0.01')

CLASS_MULTIPLIERS: Dict[SeatClass, Decimal] = {
    SeatClass.ECONOMY: Decimal('1'),
    SeatClass.PREMIUM_ECONOMY: Decimal('1.3'),
    SeatClass.BUSINESS: Decimal('2.5'),
    SeatClass.FIRST: Decimal('4'),
}

SEAT_CLASS_BASE_PRICES: Dict[SeatClass, Decimal] = {
    SeatClass.ECONOMY: Decimal('0'),
    SeatClass.PREMIUM_ECONOMY: Decimal('30'),
    SeatClass.BUSINESS: Decimal('100'),
    SeatClass.FIRST: Decimal('200'),
}

SEAT_TYPE_MULTIPLIERS: Dict[SeatType, Decimal] = {
    SeatType.WINDOW: Decimal('1.2'),
    SeatType.AISLE: Decimal('1.1'),
    SeatType.MIDDLE: Decimal('1.0'),
}

_DURATION_PATTERN = re.compile(r'^\s*(\d+)h\s*(\d+)m\s*$')


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def class_pricing(base_price: Decimal) -> Dict[SeatClass, Decimal]:
    return {
        seat_class: round_money(base_price * CLASS_MULTIPLIERS[seat_class])
        for seat_class in SEAT_CLASS_ORDER
    }


def seat_price(seat_class: SeatClass, seat_type: SeatType) -> Decimal:
    return round_money(SEAT_CLASS_BASE_PRICES[seat_class] * SEAT_TYPE_MULTIPLIERS[seat_type])


def duration_minutes(departure: datetime, arrival: datetime) -> int:
    """Whole minutes between departure and arrival (floored)"""
    if arrival <= departure:
        raise ValidationError.for_field(
            'arrival_time', 'Arrival time must be after departure time', 'INVALID_TIME_SEQUENCE'
        )
    return int((arrival - departure).total_seconds() // 60)


def format_duration(minutes: int) -> str:
    hours, remainder = divmod(minutes, 60)
    return f'{hours}h {remainder}m'


def parse_duration(text: str) -> Tuple[int, int]:
    """Inverse of format_duration; also accepts the compact "XhYm" form"""
    match = _DURATION_PATTERN.match(text)
    if not match:
        raise ValueError(f'Not a duration: {text!r}')
    return int(match.group(1)), int(match.group(2))


def availability(total: int, available: int) -> Availability:
    if total <= 0:
        percentage = 0
    else:
        ratio = Decimal(available * 100) / Decimal(total)
        percentage = int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return Availability(total=total, available=available, percentage=percentage)
