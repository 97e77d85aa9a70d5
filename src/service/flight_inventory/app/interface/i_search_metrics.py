"""
Search Metrics Interface

Observability port injected into the use cases; no module-level collectors.
"""

from abc import ABC, abstractmethod


class ISearchMetrics(ABC):
    @abstractmethod
    def record_search(self, *, cache_hit: bool, result_count: int, duration: float) -> None:
        pass

    @abstractmethod
    def record_cache_error(self, *, operation: str) -> None:
        pass

    @abstractmethod
    def record_flight_created(self, *, seat_count: int) -> None:
        pass

    @abstractmethod
    def record_status_change(self, *, status: str) -> None:
        pass
