"""Flight Inventory Domain Value Objects"""

from src.service.flight_inventory.domain.value_object.search_plan import DateTimeRange, SearchPlan
from src.service.flight_inventory.domain.value_object.search_query import SearchQuery, TimeWindow
from src.service.flight_inventory.domain.value_object.search_result import (
    Availability,
    EnrichedFlight,
    Pagination,
    SearchFilters,
    SearchResult,
)

__all__ = [
    'Availability',
    'DateTimeRange',
    'EnrichedFlight',
    'Pagination',
    'SearchFilters',
    'SearchPlan',
    'SearchQuery',
    'SearchResult',
    'TimeWindow',
]
