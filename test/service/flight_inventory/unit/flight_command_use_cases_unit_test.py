"""
Unit tests for the flight command use cases

Creation (validation order, atomic seat generation), partial updates with the
schedule guard, and status changes.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any, Callable, List
from unittest.mock import AsyncMock, MagicMock

import attrs
import pytest

from src.platform.exception.exceptions import ConflictError, NotFoundError, ValidationError
from src.service.flight_inventory.app.command.create_flight_use_case import CreateFlightUseCase
from src.service.flight_inventory.app.command.update_flight_status_use_case import (
    UpdateFlightStatusUseCase,
)
from src.service.flight_inventory.app.command.update_flight_use_case import UpdateFlightUseCase
from src.service.flight_inventory.domain.aggregate.flight_aggregate import FlightAggregate
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.entity.seat_entity import SeatEntity
from src.service.flight_inventory.domain.enum.flight_status import FlightStatus
from test.service.flight_inventory.fixtures import ARRIVAL, DEPARTURE, make_airplane, make_flight


NOW = datetime(2024, 6, 1, 8, 7, 30, tzinfo=UTC)


def _create_params(**overrides: Any) -> dict[str, Any]:
    params: dict[str, Any] = {
        'flight_number': 'AA100',
        'airline_id': 1,
        'airplane_id': 1,
        'departure_airport_id': 1,
        'arrival_airport_id': 2,
        'departure_time': DEPARTURE,
        'arrival_time': ARRIVAL,
        'base_price': Decimal('200.00'),
    }
    params.update(overrides)
    return params


@pytest.fixture
def created() -> dict[str, Any]:
    """Captures what the command repo was asked to persist"""
    return {}


@pytest.fixture
def create_use_case(
    mock_flight_command_repo: AsyncMock,
    mock_flight_query_repo: AsyncMock,
    mock_search_metrics: MagicMock,
    created: dict[str, Any],
) -> CreateFlightUseCase:
    async def create_flight_with_seats(
        *, flight: FlightEntity, build_seats: Callable[[int], List[SeatEntity]]
    ) -> FlightAggregate:
        saved = attrs.evolve(flight, id=99)
        created['flight'] = saved
        created['seats'] = build_seats(99)
        return FlightAggregate(flight=saved, seats=created['seats'])

    async def get_flight_by_id(*, flight_id: int, include_seats: bool = False) -> Any:
        return FlightAggregate(flight=created['flight']) if 'flight' in created else None

    mock_flight_command_repo.create_flight_with_seats.side_effect = create_flight_with_seats
    mock_flight_query_repo.get_flight_by_id.side_effect = get_flight_by_id
    mock_flight_query_repo.get_airplane_by_id.return_value = make_airplane(
        capacity=16, seat_configuration={'economy': 12, 'business': 4}
    )
    return CreateFlightUseCase(
        flight_command_repo=mock_flight_command_repo,
        flight_query_repo=mock_flight_query_repo,
        search_metrics=mock_search_metrics,
    )


@pytest.mark.unit
class TestCreateFlightUseCase:
    @pytest.mark.asyncio
    async def test_flight_and_generated_seats_are_persisted_together(
        self,
        create_use_case: CreateFlightUseCase,
        mock_flight_command_repo: AsyncMock,
        mock_search_metrics: MagicMock,
        created: dict[str, Any],
    ):
        enriched = await create_use_case.create(**_create_params())

        mock_flight_command_repo.create_flight_with_seats.assert_awaited_once()
        assert created['flight'].total_seats == 16
        assert created['flight'].available_seats == 16
        assert created['flight'].status == FlightStatus.SCHEDULED
        assert len(created['seats']) == 16
        assert {s.flight_id for s in created['seats']} == {99}
        assert enriched.flight.id == 99
        assert enriched.availability.percentage == 100
        mock_search_metrics.record_flight_created.assert_called_once_with(seat_count=16)

    @pytest.mark.asyncio
    async def test_same_airports_rejected_before_airplane_lookup(
        self, create_use_case: CreateFlightUseCase, mock_flight_query_repo: AsyncMock
    ):
        with pytest.raises(ConflictError) as exc_info:
            await create_use_case.create(**_create_params(arrival_airport_id=1))

        assert exc_info.value.code == 'SAME_AIRPORTS'
        mock_flight_query_repo.get_airplane_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_time_order_rejected_before_airplane_lookup(
        self, create_use_case: CreateFlightUseCase, mock_flight_query_repo: AsyncMock
    ):
        with pytest.raises(ValidationError) as exc_info:
            await create_use_case.create(**_create_params(arrival_time=DEPARTURE))

        assert exc_info.value.code == 'INVALID_TIME_SEQUENCE'
        mock_flight_query_repo.get_airplane_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_naive_times_are_taken_as_utc(
        self, create_use_case: CreateFlightUseCase, created: dict[str, Any]
    ):
        await create_use_case.create(
            **_create_params(
                departure_time=datetime(2024, 6, 1, 8, 0),
                arrival_time=datetime(2024, 6, 1, 9, 30),
            )
        )

        assert created['flight'].departure_time == datetime(2024, 6, 1, 8, 0, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_unknown_airplane(
        self,
        create_use_case: CreateFlightUseCase,
        mock_flight_query_repo: AsyncMock,
        mock_flight_command_repo: AsyncMock,
    ):
        mock_flight_query_repo.get_airplane_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await create_use_case.create(**_create_params())

        assert exc_info.value.code == 'AIRPLANE_NOT_FOUND'
        mock_flight_command_repo.create_flight_with_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_seat_configuration_writes_nothing(
        self,
        create_use_case: CreateFlightUseCase,
        mock_flight_query_repo: AsyncMock,
        mock_flight_command_repo: AsyncMock,
    ):
        mock_flight_query_repo.get_airplane_by_id.return_value = make_airplane(
            capacity=10, seat_configuration={'economy': 12}
        )

        with pytest.raises(ValidationError) as exc_info:
            await create_use_case.create(**_create_params())

        assert exc_info.value.code == 'INVALID_SEAT_CONFIGURATION'
        mock_flight_command_repo.create_flight_with_seats.assert_not_awaited()


@pytest.fixture
def mock_result_cache() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def stored_flight(
    mock_flight_query_repo: AsyncMock, mock_flight_command_repo: AsyncMock
) -> dict[str, FlightEntity]:
    """Single-row fake store: updates are applied and visible to later reads"""
    store = {'flight': make_flight(id=5)}

    async def get_flight_by_id(*, flight_id: int, include_seats: bool = False) -> Any:
        return FlightAggregate(flight=store['flight']) if flight_id == 5 else None

    async def update_flight(*, flight_id: int, changes: dict[str, Any]) -> Any:
        store['flight'] = attrs.evolve(store['flight'], **changes)
        return store['flight']

    mock_flight_query_repo.get_flight_by_id.side_effect = get_flight_by_id
    mock_flight_command_repo.update_flight.side_effect = update_flight
    return store


@pytest.mark.unit
class TestUpdateFlightUseCase:
    @pytest.fixture
    def use_case(
        self,
        mock_flight_command_repo: AsyncMock,
        mock_flight_query_repo: AsyncMock,
        mock_result_cache: AsyncMock,
    ) -> UpdateFlightUseCase:
        return UpdateFlightUseCase(
            flight_command_repo=mock_flight_command_repo,
            flight_query_repo=mock_flight_query_repo,
            result_cache=mock_result_cache,
            schedule_tolerance=timedelta(hours=2),
        )

    @pytest.mark.asyncio
    async def test_three_hour_move_with_booking_is_restricted(
        self,
        use_case: UpdateFlightUseCase,
        stored_flight: dict[str, FlightEntity],
        mock_flight_query_repo: AsyncMock,
        mock_flight_command_repo: AsyncMock,
    ):
        mock_flight_query_repo.count_bookings_for_flight.return_value = 1

        with pytest.raises(ConflictError) as exc_info:
            await use_case.update(
                flight_id=5,
                changes={
                    'departure_time': DEPARTURE + timedelta(hours=3),
                    'arrival_time': ARRIVAL + timedelta(hours=3),
                },
            )

        assert exc_info.value.code == 'TIME_CHANGE_RESTRICTED'
        mock_flight_command_repo.update_flight.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_one_hour_move_with_booking_succeeds_and_drops_cached_flight(
        self,
        use_case: UpdateFlightUseCase,
        stored_flight: dict[str, FlightEntity],
        mock_flight_query_repo: AsyncMock,
        mock_result_cache: AsyncMock,
    ):
        mock_flight_query_repo.count_bookings_for_flight.return_value = 1

        enriched = await use_case.update(
            flight_id=5, changes={'departure_time': DEPARTURE + timedelta(hours=1)}
        )

        assert enriched.flight.departure_time == DEPARTURE + timedelta(hours=1)
        assert enriched.duration == 315
        mock_result_cache.delete.assert_awaited_once_with('flight:5')

    @pytest.mark.asyncio
    async def test_non_schedule_change_skips_booking_count(
        self,
        use_case: UpdateFlightUseCase,
        stored_flight: dict[str, FlightEntity],
        mock_flight_query_repo: AsyncMock,
    ):
        enriched = await use_case.update(flight_id=5, changes={'is_active': False})

        assert enriched.flight.is_active is False
        mock_flight_query_repo.count_bookings_for_flight.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_flight(self, use_case: UpdateFlightUseCase, stored_flight):
        with pytest.raises(NotFoundError):
            await use_case.update(flight_id=404, changes={'gate': 'A1'})


@pytest.mark.unit
class TestUpdateFlightStatusUseCase:
    @pytest.fixture
    def use_case(
        self,
        mock_flight_command_repo: AsyncMock,
        mock_flight_query_repo: AsyncMock,
        mock_result_cache: AsyncMock,
        mock_search_metrics: MagicMock,
    ) -> UpdateFlightStatusUseCase:
        return UpdateFlightStatusUseCase(
            flight_command_repo=mock_flight_command_repo,
            flight_query_repo=mock_flight_query_repo,
            result_cache=mock_result_cache,
            search_metrics=mock_search_metrics,
            clock=lambda: NOW,
        )

    @pytest.mark.asyncio
    async def test_departed_sets_actual_departure_to_call_time(
        self,
        use_case: UpdateFlightStatusUseCase,
        stored_flight: dict[str, FlightEntity],
        mock_flight_command_repo: AsyncMock,
        mock_result_cache: AsyncMock,
        mock_search_metrics: MagicMock,
    ):
        enriched = await use_case.update_status(flight_id=5, status=FlightStatus.DEPARTED)

        mock_flight_command_repo.update_flight.assert_awaited_once_with(
            flight_id=5,
            changes={'status': FlightStatus.DEPARTED, 'actual_departure_time': NOW},
        )
        assert enriched.flight.actual_departure_time == NOW
        assert enriched.flight.actual_arrival_time is None
        mock_result_cache.delete.assert_awaited_once_with('flight:5')
        mock_search_metrics.record_status_change.assert_called_once_with(status='departed')

    @pytest.mark.asyncio
    async def test_reapplying_terminal_status_is_a_no_op(
        self,
        use_case: UpdateFlightStatusUseCase,
        stored_flight: dict[str, FlightEntity],
        mock_flight_command_repo: AsyncMock,
    ):
        stored_flight['flight'] = make_flight(id=5, status=FlightStatus.CANCELLED)

        enriched = await use_case.update_status(flight_id=5, status=FlightStatus.CANCELLED)

        assert enriched.flight.status == FlightStatus.CANCELLED
        mock_flight_command_repo.update_flight.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_leaving_terminal_status_is_rejected(
        self,
        use_case: UpdateFlightStatusUseCase,
        stored_flight: dict[str, FlightEntity],
    ):
        stored_flight['flight'] = make_flight(id=5, status=FlightStatus.ARRIVED)

        with pytest.raises(ConflictError) as exc_info:
            await use_case.update_status(flight_id=5, status=FlightStatus.SCHEDULED)

        assert exc_info.value.code == 'INVALID_STATUS_TRANSITION'
