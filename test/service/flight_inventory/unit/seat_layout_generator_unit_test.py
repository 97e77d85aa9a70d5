"""
Unit tests for the seat layout generator

Row assignment, per-class counts, seat type by column and configuration checks.
"""

from collections import Counter
from decimal import Decimal

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.flight_inventory.domain.enum.seat_class import SeatClass
from src.service.flight_inventory.domain.enum.seat_type import SeatType
from src.service.flight_inventory.domain.seat_layout_generator import (
    generate_seats,
    group_seats_by_class,
    resolve_seat_configuration,
    seat_type_for,
)
from test.service.flight_inventory.fixtures import make_airplane


@pytest.mark.unit
class TestGenerateSeats:
    def test_economy_then_business_rows(self):
        # Given: 12 economy (6 wide) and 4 business (4 wide)
        airplane = make_airplane(capacity=16, seat_configuration={'economy': 12, 'business': 4})

        # When
        seats = generate_seats(7, airplane)

        # Then: two full economy rows, business starts on row 3
        economy = [s for s in seats if s.seat_class == SeatClass.ECONOMY]
        business = [s for s in seats if s.seat_class == SeatClass.BUSINESS]
        assert len(economy) == 12
        assert len(business) == 4
        assert {s.row for s in economy} == {1, 2}
        assert {s.row for s in business} == {3}
        assert [s.seat_number for s in business] == ['3A', '3B', '3C', '3D']
        assert all(s.flight_id == 7 for s in seats)

    def test_count_matches_configuration_and_no_collisions(self):
        config = {'economy': 97, 'premium-economy': 13, 'business': 9, 'first': 3}
        airplane = make_airplane(capacity=150, seat_configuration=config)

        seats = generate_seats(1, airplane)

        assert len(seats) == sum(config.values())
        per_class = Counter(s.seat_class.value for s in seats)
        assert dict(per_class) == config
        positions = [(s.row, s.column) for s in seats]
        assert len(positions) == len(set(positions))
        assert len({s.seat_number for s in seats}) == len(seats)

    def test_partial_row_stops_class_and_next_class_starts_new_row(self):
        airplane = make_airplane(capacity=10, seat_configuration={'economy': 8, 'first': 2})

        seats = generate_seats(1, airplane)

        assert [s.seat_number for s in seats] == [
            '1A', '1B', '1C', '1D', '1E', '1F', '2A', '2B', '3A', '3B',
        ]
        assert [s.seat_class for s in seats[-2:]] == [SeatClass.FIRST, SeatClass.FIRST]

    def test_classes_follow_fixed_order_regardless_of_config_order(self):
        airplane = make_airplane(
            capacity=14, seat_configuration={'first': 4, 'business': 4, 'economy': 6}
        )

        seats = generate_seats(1, airplane)

        first_row = {
            seat_class: min(s.row for s in seats if s.seat_class == seat_class)
            for seat_class in (SeatClass.ECONOMY, SeatClass.BUSINESS, SeatClass.FIRST)
        }
        assert first_row == {SeatClass.ECONOMY: 1, SeatClass.BUSINESS: 2, SeatClass.FIRST: 3}

    def test_missing_configuration_means_all_economy(self):
        airplane = make_airplane(capacity=9, seat_configuration=None)

        seats = generate_seats(1, airplane)

        assert len(seats) == 9
        assert {s.seat_class for s in seats} == {SeatClass.ECONOMY}

    def test_seat_type_depends_only_on_column(self):
        airplane = make_airplane(
            capacity=40,
            seat_configuration={'economy': 12, 'premium-economy': 6, 'business': 8, 'first': 4},
        )

        seats = generate_seats(1, airplane)

        for seat in seats:
            per_row = 4 if seat.seat_class in (SeatClass.BUSINESS, SeatClass.FIRST) else 6
            assert seat.seat_type == seat_type_for('ABCDEF'.index(seat.column), per_row)

    def test_seat_prices_follow_class_and_type(self):
        airplane = make_airplane(capacity=4, seat_configuration={'business': 4})

        seats = generate_seats(1, airplane)

        assert [(s.seat_type, s.base_price) for s in seats] == [
            (SeatType.WINDOW, Decimal('120.00')),
            (SeatType.AISLE, Decimal('110.00')),
            (SeatType.AISLE, Decimal('110.00')),
            (SeatType.WINDOW, Decimal('120.00')),
        ]


@pytest.mark.unit
class TestSeatTypeFor:
    @pytest.mark.parametrize(
        'column_index,expected',
        [
            (0, SeatType.WINDOW),
            (1, SeatType.MIDDLE),
            (2, SeatType.AISLE),
            (3, SeatType.AISLE),
            (4, SeatType.MIDDLE),
            (5, SeatType.WINDOW),
        ],
    )
    def test_six_abreast(self, column_index, expected):
        assert seat_type_for(column_index, 6) == expected

    @pytest.mark.parametrize(
        'column_index,expected',
        [(0, SeatType.WINDOW), (1, SeatType.AISLE), (2, SeatType.AISLE), (3, SeatType.WINDOW)],
    )
    def test_four_abreast(self, column_index, expected):
        assert seat_type_for(column_index, 4) == expected


@pytest.mark.unit
class TestResolveSeatConfiguration:
    def test_legacy_premium_economy_key(self):
        airplane = make_airplane(capacity=20, seat_configuration={'premiumEconomy': 12})

        assert resolve_seat_configuration(airplane) == {SeatClass.PREMIUM_ECONOMY: 12}

    def test_all_zero_counts_fall_back_to_capacity(self):
        airplane = make_airplane(capacity=30, seat_configuration={'economy': 0, 'business': 0})

        assert resolve_seat_configuration(airplane) == {SeatClass.ECONOMY: 30}

    def test_total_over_capacity_is_rejected(self):
        airplane = make_airplane(capacity=15, seat_configuration={'economy': 10, 'business': 10})

        with pytest.raises(ValidationError) as exc_info:
            resolve_seat_configuration(airplane)

        assert exc_info.value.code == 'INVALID_SEAT_CONFIGURATION'
        assert 'exceeds airplane capacity 15' in exc_info.value.errors[0]['message']

    def test_unknown_class_and_negative_count_are_both_reported(self):
        airplane = make_airplane(capacity=50, seat_configuration={'luxury': 4, 'economy': -1})

        with pytest.raises(ValidationError) as exc_info:
            resolve_seat_configuration(airplane)

        assert len(exc_info.value.errors) == 2
        assert all(e['field'] == 'seat_configuration' for e in exc_info.value.errors)


@pytest.mark.unit
class TestGroupSeatsByClass:
    def test_every_class_present_even_when_empty(self):
        airplane = make_airplane(capacity=6, seat_configuration={'economy': 6})

        seat_map = group_seats_by_class(generate_seats(1, airplane))

        assert list(seat_map) == [
            SeatClass.ECONOMY,
            SeatClass.PREMIUM_ECONOMY,
            SeatClass.BUSINESS,
            SeatClass.FIRST,
        ]
        assert len(seat_map[SeatClass.ECONOMY]) == 6
        assert seat_map[SeatClass.FIRST] == []
