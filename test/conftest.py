"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite database file, in-memory result cache, UTC reference day)
- Database table creation and cleanup for integration tests
- The session-scoped HTTP client
- Seed helpers for reference data (airlines, airports, airplanes)

Architecture:
- Unit tests (marked `unit`): mocked collaborators only, no database
- Integration tests: real SQLAlchemy engine on aiosqlite, cleaned per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the DI container read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    db_path = test_log_dir / f'flight_inventory_{worker_id}.db'
    if db_path.exists():
        db_path.unlink()
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'

    os.environ['SEARCH_CACHE_ENABLED'] = 'true'
    os.environ['SEARCH_CACHE_BACKEND'] = 'memory'
    os.environ['SEARCH_CACHE_FAIL_OPEN'] = 'false'
    os.environ['SEARCH_REFERENCE_TIMEZONE'] = 'UTC'


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.database.db_setting import (  # noqa: E402
    Base,
    create_db_and_tables,
    dispose_engine,
    get_engine,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _clean_all_tables() -> None:
    await create_db_and_tables()
    async with get_engine().begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    container.search_result_cache().clear()
    yield
    await dispose_engine()


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
