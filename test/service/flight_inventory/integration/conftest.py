from typing import Dict

import pytest

from src.platform.config.di import container
from src.service.flight_inventory.driven_adapter.repo.flight_command_repo_impl import (
    FlightCommandRepoImpl,
)
from src.service.flight_inventory.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from test.service.flight_inventory.fixtures import seed_reference_data


@pytest.fixture
async def ids(clean_database: None) -> Dict[str, int]:
    """Reference rows seeded after the tables are cleaned"""
    return await seed_reference_data()


@pytest.fixture
def flight_query_repo() -> FlightQueryRepoImpl:
    return container.flight_query_repo()


@pytest.fixture
def flight_command_repo() -> FlightCommandRepoImpl:
    return container.flight_command_repo()
