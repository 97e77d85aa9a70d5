"""
Search Query value object

Immutable criteria for one flight search. `SearchQuery.from_params` is the
validation boundary: it parses raw (usually string) request parameters and
raises a single ValidationError listing every rejected field, so nothing
malformed ever reaches the planner or the repository.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import re
from typing import Any, Dict, List, Optional, Tuple

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ValidationError
from src.service.flight_inventory.domain.enum.search_sort import SortOrder
from src.service.flight_inventory.domain.enum.seat_class import SeatClass


MAX_PASSENGERS = 9
_IATA_PATTERN = re.compile(r'^[A-Za-z]{3}$')
_TIME_RANGE_PATTERN = re.compile(r'^\s*(\d{1,2})\s*-\s*(\d{1,2})\s*$')
_CENT = Decimal('0.01')


@attrs.define(frozen=True)
class TimeWindow:
    """Hour-of-day range, both ends inclusive (end covers :59:59)"""

    start: int = attrs.field()
    end: int = attrs.field()

    @start.validator
    @end.validator
    def _check_hour(self, attribute: attrs.Attribute, value: int) -> None:
        if not 0 <= value <= 23:
            raise ValueError(f'{attribute.name} hour must be between 0 and 23')

    def __attrs_post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError('start hour must not be after end hour')

    def __str__(self) -> str:
        return f'{self.start}-{self.end}'

    @classmethod
    def parse(cls, value: Any) -> 'TimeWindow':
        if isinstance(value, TimeWindow):
            return value
        if isinstance(value, dict):
            return cls(start=int(value['start']), end=int(value['end']))
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(start=int(value[0]), end=int(value[1]))
        if isinstance(value, str) and (match := _TIME_RANGE_PATTERN.match(value)):
            return cls(start=int(match.group(1)), end=int(match.group(2)))
        raise ValueError('time range must look like "6-12"')


@attrs.define(frozen=True)
class SearchQuery:
    origin: str
    destination: str
    departure_date: Optional[date] = None
    return_date: Optional[date] = None
    passengers: int = 1
    flight_class: SeatClass = SeatClass.ECONOMY
    page: int = 1
    limit: int = 20
    sort_by: str = 'price'
    sort_order: SortOrder = SortOrder.ASC
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    preferred_airlines: Tuple[str, ...] = ()
    max_stops: int = 0
    departure_time_range: Optional[TimeWindow] = None
    arrival_time_range: Optional[TimeWindow] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def cache_fields(self) -> Dict[str, str]:
        """Every field rendered as a string; None renders as ''"""
        rendered: Dict[str, str] = {}
        for field in attrs.fields(SearchQuery):
            value = getattr(self, field.name)
            if value is None:
                rendered[field.name] = ''
            elif isinstance(value, tuple):
                rendered[field.name] = ','.join(value)
            elif isinstance(value, date):
                rendered[field.name] = value.isoformat()
            else:
                rendered[field.name] = str(value)
        return rendered

    @classmethod
    def from_params(cls, **raw: Any) -> 'SearchQuery':
        """
        Build a query from raw request parameters.

        Accepts strings or already-typed values. Unknown `sort_by` values are kept
        (the planner falls back to departure order), everything else is checked.
        """
        errors: List[Dict[str, str]] = []

        def reject(field: str, message: str, code: str = 'INVALID_VALUE') -> None:
            errors.append({'field': field, 'message': message, 'code': code})

        origin = _parse_iata(raw.get('origin'), 'origin', reject)
        destination = _parse_iata(raw.get('destination'), 'destination', reject)

        departure_date = _parse_date(raw.get('departure_date'), 'departure_date', reject)
        return_date = _parse_date(raw.get('return_date'), 'return_date', reject)
        if departure_date and return_date and return_date <= departure_date:
            reject(
                'return_date', 'Return date must be after departure date', 'INVALID_DATE_RANGE'
            )

        passengers = _parse_int(raw.get('passengers'), 'passengers', 1, reject)
        if passengers is not None and not 1 <= passengers <= MAX_PASSENGERS:
            reject('passengers', f'Number of passengers must be between 1 and {MAX_PASSENGERS}')

        flight_class = SeatClass.ECONOMY
        if raw.get('flight_class') not in (None, ''):
            try:
                flight_class = SeatClass(raw['flight_class'])
            except ValueError:
                reject('flight_class', 'Invalid flight class')

        page = _parse_int(raw.get('page'), 'page', 1, reject)
        if page is not None and page < 1:
            reject('page', 'Page must be a positive integer')

        limit = _parse_int(raw.get('limit'), 'limit', settings.SEARCH_DEFAULT_LIMIT, reject)
        if limit is not None and not 1 <= limit <= settings.SEARCH_MAX_LIMIT:
            reject('limit', f'Limit must be between 1 and {settings.SEARCH_MAX_LIMIT}')

        sort_by = str(raw.get('sort_by') or 'price')
        sort_order = SortOrder.ASC
        if raw.get('sort_order') not in (None, ''):
            try:
                sort_order = SortOrder(str(raw['sort_order']).lower())
            except ValueError:
                reject('sort_order', 'Sort order must be either asc or desc')

        min_price = _parse_price(raw.get('min_price'), 'min_price', reject)
        max_price = _parse_price(raw.get('max_price'), 'max_price', reject)
        if min_price is not None and max_price is not None and min_price > max_price:
            reject('min_price', 'Minimum price must not exceed maximum price')

        max_stops = _parse_int(raw.get('max_stops'), 'max_stops', 0, reject)
        if max_stops is not None and max_stops < 0:
            reject('max_stops', 'Max stops must not be negative')

        departure_window = _parse_window(
            raw.get('departure_time_range'), 'departure_time_range', reject
        )
        arrival_window = _parse_window(raw.get('arrival_time_range'), 'arrival_time_range', reject)

        if errors:
            raise ValidationError('Invalid search parameters', errors=errors)

        return cls(
            origin=origin,  # type: ignore[arg-type]
            destination=destination,  # type: ignore[arg-type]
            departure_date=departure_date,
            return_date=return_date,
            passengers=passengers,  # type: ignore[arg-type]
            flight_class=flight_class,
            page=page,  # type: ignore[arg-type]
            limit=limit,  # type: ignore[arg-type]
            sort_by=sort_by,
            sort_order=sort_order,
            min_price=min_price,
            max_price=max_price,
            preferred_airlines=_parse_airlines(raw.get('preferred_airlines')),
            max_stops=max_stops,  # type: ignore[arg-type]
            departure_time_range=departure_window,
            arrival_time_range=arrival_window,
        )


def _parse_iata(value: Any, field: str, reject: Any) -> Optional[str]:
    if value is None or not str(value).strip():
        reject(field, 'Airport code is required', 'REQUIRED')
        return None
    code = str(value).strip()
    if not _IATA_PATTERN.match(code):
        reject(field, 'Airport code must be 3 characters', 'INVALID_AIRPORT_CODE')
        return None
    return code.upper()


def _parse_date(value: Any, field: str, reject: Any) -> Optional[date]:
    if value is None or value == '':
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        reject(field, 'Please provide a valid date (YYYY-MM-DD)', 'INVALID_DATE')
        return None


def _parse_int(value: Any, field: str, default: int, reject: Any) -> Optional[int]:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        reject(field, f'{field} must be an integer')
        return None


def _parse_price(value: Any, field: str, reject: Any) -> Optional[Decimal]:
    if value is None or value == '':
        return None
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        reject(field, f'{field} must be a number')
        return None
    if not price.is_finite() or price < 0:
        reject(field, f'{field} must not be negative')
        return None
    return price.quantize(_CENT, rounding=ROUND_HALF_UP)


def _parse_window(value: Any, field: str, reject: Any) -> Optional[TimeWindow]:
    if value is None or value == '':
        return None
    try:
        return TimeWindow.parse(value)
    except (KeyError, TypeError, ValueError) as e:
        reject(field, str(e) or 'Invalid time range', 'INVALID_TIME_RANGE')
        return None


def _parse_airlines(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    items = value.split(',') if isinstance(value, str) else list(value)
    codes = {str(item).strip().upper() for item in items if str(item).strip()}
    return tuple(sorted(codes))
