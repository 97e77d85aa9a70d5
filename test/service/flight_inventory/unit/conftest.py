"""
Conftest for flight inventory unit tests - mocked collaborators only.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.service.flight_inventory.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_inventory.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics
from src.service.flight_inventory.app.result_cache_gateway import ResultCacheGateway
from src.service.flight_inventory.driven_adapter.cache.in_memory_search_result_cache import (
    InMemorySearchResultCache,
)


@pytest.fixture
def mock_flight_query_repo() -> AsyncMock:
    return AsyncMock(spec=IFlightQueryRepo)


@pytest.fixture
def mock_flight_command_repo() -> AsyncMock:
    return AsyncMock(spec=IFlightCommandRepo)


@pytest.fixture
def mock_search_metrics() -> MagicMock:
    return MagicMock(spec=ISearchMetrics)


@pytest.fixture
def result_cache(mock_search_metrics: MagicMock) -> ResultCacheGateway:
    """Real gateway over an in-memory cache so hits and misses behave like production"""
    return ResultCacheGateway(
        cache=InMemorySearchResultCache(),
        metrics=mock_search_metrics,
        enabled=True,
        fail_open=False,
    )
