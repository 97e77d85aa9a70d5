"""Application layer interfaces (Ports)"""

from src.service.flight_inventory.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics
from src.service.flight_inventory.app.interface.i_search_result_cache import ISearchResultCache

__all__ = [
    'IFlightCommandRepo',
    'IFlightQueryRepo',
    'ISearchMetrics',
    'ISearchResultCache',
]
