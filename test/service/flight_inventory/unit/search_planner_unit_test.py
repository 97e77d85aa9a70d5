from datetime import UTC, date, datetime
from decimal import Decimal
import time
from zoneinfo import ZoneInfo

import attrs
import pytest

from src.service.flight_inventory.domain.entity.airline_entity import AirlineEntity
from src.service.flight_inventory.domain.enum.flight_status import SEARCHABLE_STATUSES
from src.service.flight_inventory.domain.enum.search_sort import SortColumn, SortOrder
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.search_planner import (
    build_search_plan,
    build_search_result,
    day_range,
    enrich_flight,
    resolve_reference_timezone,
    resolve_sort,
)
from src.service.flight_inventory.domain.value_object.search_query import SearchQuery
from src.service.flight_inventory.domain.value_object.search_result import SearchResult
from src.service.flight_inventory.driven_adapter.cache.cache_codec import decode, encode
from test.service.flight_inventory.fixtures import make_flight


NOW = datetime(2024, 5, 20, 10, 0, tzinfo=UTC)


@pytest.mark.unit
class TestBuildSearchPlan:
    def test_base_predicate_and_route(self):
        query = SearchQuery.from_params(
            origin='JFK', destination='LAX', departure_date='2024-06-01', passengers=2
        )

        plan = build_search_plan(query, reference_tz=UTC, now=NOW)

        assert plan.min_available_seats == 2
        assert plan.statuses == SEARCHABLE_STATUSES
        assert (plan.origin, plan.destination) == ('JFK', 'LAX')
        assert plan.departure_range.start == datetime(2024, 6, 1, tzinfo=UTC)
        assert plan.departure_range.end == datetime(2024, 6, 1, 23, 59, 59, 999999, tzinfo=UTC)

    def test_no_departure_date_means_no_day_filter(self):
        query = SearchQuery.from_params(origin='JFK', destination='LAX')

        assert build_search_plan(query, reference_tz=UTC, now=NOW).departure_range is None

    def test_pagination(self):
        query = SearchQuery.from_params(origin='JFK', destination='LAX', page=3, limit=20)

        plan = build_search_plan(query, reference_tz=UTC, now=NOW)

        assert (plan.limit, plan.offset) == (20, 40)

    def test_price_and_airline_filters_pass_through(self):
        query = SearchQuery.from_params(
            origin='JFK',
            destination='LAX',
            min_price='100',
            max_price='300',
            preferred_airlines='DL',
        )

        plan = build_search_plan(query, reference_tz=UTC, now=NOW)

        assert (plan.min_price, plan.max_price) == (Decimal('100.00'), Decimal('300.00'))
        assert plan.airline_codes == ('DL',)

    def test_hour_windows_are_anchored_on_today(self):
        query = SearchQuery.from_params(
            origin='JFK',
            destination='LAX',
            departure_date='2024-06-01',
            departure_time_range='6-12',
        )

        plan = build_search_plan(query, reference_tz=UTC, now=NOW)

        assert plan.departure_window.start == datetime(2024, 5, 20, 6, tzinfo=UTC)
        assert plan.departure_window.end == datetime(
            2024, 5, 20, 12, 59, 59, 999999, tzinfo=UTC
        )
        assert plan.arrival_window is None

    def test_today_is_taken_in_the_reference_timezone(self):
        taipei = ZoneInfo('Asia/Taipei')
        query = SearchQuery.from_params(origin='TPE', destination='NRT', arrival_time_range='0-5')

        plan = build_search_plan(
            query, reference_tz=taipei, now=datetime(2024, 5, 20, 20, 0, tzinfo=UTC)
        )

        assert plan.arrival_window.start == datetime(2024, 5, 21, 0, tzinfo=taipei)


@pytest.fixture
def new_york_local_time(monkeypatch):
    monkeypatch.setenv('TZ', 'America/New_York')
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.mark.unit
class TestServerLocalTime:
    def test_unset_timezone_means_server_local(self):
        assert resolve_reference_timezone(None) is None
        assert resolve_reference_timezone('') is None
        assert resolve_reference_timezone('Asia/Taipei') == ZoneInfo('Asia/Taipei')

    def test_day_range_uses_the_offset_in_force_on_that_date(self, new_york_local_time):
        winter = day_range(date(2024, 1, 15), None)
        summer = day_range(date(2024, 7, 15), None)

        assert winter.start.astimezone(UTC) == datetime(2024, 1, 15, 5, tzinfo=UTC)
        assert summer.start.astimezone(UTC) == datetime(2024, 7, 15, 4, tzinfo=UTC)
        assert winter.end.astimezone(UTC) == datetime(
            2024, 1, 16, 4, 59, 59, 999999, tzinfo=UTC
        )

    def test_hour_window_across_a_dst_change(self, new_york_local_time):
        query = SearchQuery.from_params(
            origin='JFK',
            destination='LAX',
            departure_date='2024-01-15',
            departure_time_range='6-12',
        )

        plan = build_search_plan(
            query, reference_tz=None, now=datetime(2024, 7, 15, 14, 0, tzinfo=UTC)
        )

        assert plan.departure_range.start.astimezone(UTC) == datetime(2024, 1, 15, 5, tzinfo=UTC)
        assert plan.departure_window.start.astimezone(UTC) == datetime(
            2024, 7, 15, 10, tzinfo=UTC
        )
        assert plan.departure_window.end.astimezone(UTC) == datetime(
            2024, 7, 15, 16, 59, 59, 999999, tzinfo=UTC
        )


@pytest.mark.unit
class TestResolveSort:
    @pytest.mark.parametrize(
        'sort_by,order,expected',
        [
            ('price', SortOrder.DESC, (SortColumn.BASE_PRICE, True)),
            ('departure', SortOrder.ASC, (SortColumn.DEPARTURE_TIME, False)),
            ('arrival', SortOrder.DESC, (SortColumn.ARRIVAL_TIME, True)),
            ('airline', SortOrder.ASC, (SortColumn.AIRLINE_NAME, False)),
            ('duration', SortOrder.ASC, (SortColumn.DEPARTURE_TIME, False)),
        ],
    )
    def test_known_keys(self, sort_by, order, expected):
        assert resolve_sort(sort_by, order) == expected

    def test_unknown_key_falls_back_to_departure_ascending(self):
        assert resolve_sort('stops', SortOrder.DESC) == (SortColumn.DEPARTURE_TIME, False)


@pytest.mark.unit
class TestEnrichment:
    def test_enrich_flight(self):
        enriched = enrich_flight(make_flight())

        assert enriched.duration == 375
        assert enriched.formatted_duration == '6h 15m'
        assert enriched.pricing[SeatClass.BUSINESS] == Decimal('500.00')
        assert (enriched.availability.available, enriched.availability.percentage) == (90, 50)
        assert enriched.seat_map is None

    def test_pages_round_up(self):
        query = SearchQuery.from_params(origin='JFK', destination='LAX', limit=20, page=3)

        result = build_search_result(query, [make_flight()] * 5, total=45)

        assert result.pagination.pages == 3
        assert result.pagination.page == 3
        assert len(result.flights) == 5

    def test_empty_result_is_not_an_error(self):
        query = SearchQuery.from_params(
            origin='JFK', destination='LAX', departure_date='2024-06-01', flight_class='first'
        )

        result = build_search_result(query, [], total=0)

        assert result.flights == []
        assert result.pagination.pages == 0
        assert result.filters.departure_date == date(2024, 6, 1)
        assert result.filters.flight_class == SeatClass.FIRST

    def test_result_survives_the_cache_codec(self):
        flight = make_flight(airline=AirlineEntity(id=1, name='American Airlines', code='AA'))
        query = SearchQuery.from_params(
            origin='JFK', destination='LAX', departure_date='2024-06-01'
        )
        result = build_search_result(query, [flight], total=1)

        restored = SearchResult(**decode(encode(attrs.asdict(result))))

        assert restored == result
