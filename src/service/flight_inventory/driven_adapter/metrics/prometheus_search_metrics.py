from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

from src.service.flight_inventory.app.interface.i_search_metrics import ISearchMetrics


class PrometheusSearchMetrics(ISearchMetrics):
    """
    Flight inventory metrics collector

    Collectors belong to the instance and are registered on the given registry
    (the process default unless one is passed, e.g. a fresh one per test).
    """

    def __init__(self, *, registry: Optional[CollectorRegistry] = None) -> None:
        registry = registry if registry is not None else REGISTRY

        # ========== Search Metrics ==========
        self.search_requests = Counter(
            'flight_search_requests_total',
            'Total flight searches',
            ['cache'],  # cache: hit/miss
            registry=registry,
        )

        self.search_duration = Histogram(
            'flight_search_duration_seconds',
            'Flight search processing time',
            ['cache'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
            registry=registry,
        )

        self.search_results = Histogram(
            'flight_search_results',
            'Flights returned per search page',
            buckets=[0, 1, 5, 10, 20, 50, 100],
            registry=registry,
        )

        self.cache_errors = Counter(
            'flight_search_cache_errors_total',
            'Result cache I/O failures',
            ['operation'],  # get/set/delete
            registry=registry,
        )

        # ========== Lifecycle Metrics ==========
        self.flights_created = Counter(
            'flights_created_total', 'Flights created', registry=registry
        )

        self.seats_generated = Counter(
            'flight_seats_generated_total', 'Seats generated for new flights', registry=registry
        )

        self.status_changes = Counter(
            'flight_status_changes_total',
            'Flight status updates',
            ['status'],
            registry=registry,
        )

    # ========== Helper Methods ==========

    def record_search(self, *, cache_hit: bool, result_count: int, duration: float) -> None:
        label = 'hit' if cache_hit else 'miss'
        self.search_requests.labels(cache=label).inc()
        self.search_duration.labels(cache=label).observe(duration)
        self.search_results.observe(result_count)

    def record_cache_error(self, *, operation: str) -> None:
        self.cache_errors.labels(operation=operation).inc()

    def record_flight_created(self, *, seat_count: int) -> None:
        self.flights_created.inc()
        self.seats_generated.inc(seat_count)

    def record_status_change(self, *, status: str) -> None:
        self.status_changes.labels(status=status).inc()
