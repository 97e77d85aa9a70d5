"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings, settings
from src.platform.database.db_setting import Database
from src.platform.state.redis_client import redis_client
from src.service.flight_inventory.app.result_cache_gateway import ResultCacheGateway
from src.service.flight_inventory.driven_adapter.cache.in_memory_search_result_cache import (
    InMemorySearchResultCache,
)
from src.service.flight_inventory.driven_adapter.cache.redis_search_result_cache import (
    RedisSearchResultCache,
)
from src.service.flight_inventory.driven_adapter.metrics.prometheus_search_metrics import (
    PrometheusSearchMetrics,
)
from src.service.flight_inventory.driven_adapter.repo.flight_command_repo_impl import (
    FlightCommandRepoImpl,
)
from src.service.flight_inventory.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per-request)
    flight_query_repo = providers.Singleton(
        FlightQueryRepoImpl, session_factory=database.provided.session
    )
    flight_command_repo = providers.Singleton(
        FlightCommandRepoImpl, session_factory=database.provided.session
    )

    # Observability (collectors registered once on the default registry)
    search_metrics = providers.Singleton(PrometheusSearchMetrics)

    # Result cache backend: redis (shared across replicas) or memory (single process)
    search_result_cache = providers.Selector(
        providers.Object(settings.SEARCH_CACHE_BACKEND),
        redis=providers.Singleton(
            RedisSearchResultCache,
            client_provider=providers.Object(redis_client.get_client),
        ),
        memory=providers.Singleton(InMemorySearchResultCache),
    )

    result_cache = providers.Singleton(
        ResultCacheGateway,
        cache=search_result_cache,
        metrics=search_metrics,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
