from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

import attrs

from src.service.flight_inventory.domain.enum.flight_status import FlightStatus
from src.service.flight_inventory.domain.enum.search_sort import SortColumn


@attrs.define(frozen=True)
class DateTimeRange:
    """Closed interval [start, end]"""

    start: datetime
    end: datetime


@attrs.define(frozen=True)
class SearchPlan:
    """
    Storage-agnostic filter/sort/pagination plan for one search page.

    Base predicate (always applied by the repository): is_active, status in
    `statuses`, available_seats >= `min_available_seats`. Every order gets a
    trailing flight id ASC tie-break.
    """

    min_available_seats: int
    statuses: Tuple[FlightStatus, ...]
    sort_column: SortColumn
    descending: bool
    limit: int
    offset: int
    origin: Optional[str] = None
    destination: Optional[str] = None
    departure_range: Optional[DateTimeRange] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    departure_window: Optional[DateTimeRange] = None
    arrival_window: Optional[DateTimeRange] = None
    airline_codes: Tuple[str, ...] = ()
