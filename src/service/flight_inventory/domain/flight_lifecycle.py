"""
Flight Lifecycle

Status state machine and the rules that decide when schedule data may change.

[Transitions]
scheduled -> boarding -> departed -> in-flight -> arrived is the usual path,
but any non-terminal status may move to any status (airlines revert "delayed"
to "scheduled" and so on). arrived and cancelled are terminal.

[Schedule Guard]
Once a flight has bookings, its departure may only move within the configured
tolerance (2 hours by default).
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

import attrs

from src.platform.exception.exceptions import ConflictError, ValidationError
from src.service.flight_inventory.domain.entity.flight_entity import FlightEntity
from src.service.flight_inventory.domain.enum.flight_status import FlightStatus


DEFAULT_SCHEDULE_TOLERANCE = timedelta(hours=2)

# Status and seat counts have their own paths (status endpoint, booking subsystem)
UPDATABLE_FIELDS = frozenset(
    {
        'flight_number',
        'airline_id',
        'departure_airport_id',
        'arrival_airport_id',
        'departure_time',
        'arrival_time',
        'base_price',
        'currency',
        'gate',
        'terminal',
        'estimated_departure_time',
        'estimated_arrival_time',
        'notes',
        'is_active',
    }
)
SCHEDULE_FIELDS = frozenset({'departure_time', 'arrival_time'})


def validate_route_and_times(
    *,
    departure_airport_id: int,
    arrival_airport_id: int,
    departure_time: datetime,
    arrival_time: datetime,
) -> None:
    """Airports first, then time order"""
    if departure_airport_id == arrival_airport_id:
        raise ConflictError(
            'Arrival airport must be different from departure airport', code='SAME_AIRPORTS'
        )
    if arrival_time <= departure_time:
        raise ValidationError.for_field(
            'arrival_time', 'Arrival time must be after departure time', 'INVALID_TIME_SEQUENCE'
        )


def validate_base_price(base_price: Decimal) -> None:
    if base_price < 0:
        raise ValidationError.for_field(
            'base_price', 'Base price must not be negative', 'INVALID_PRICE'
        )


def check_status_transition(current: FlightStatus, new_status: FlightStatus) -> None:
    if current.is_terminal and new_status != current:
        raise ConflictError(
            f'Flight is {current.value}; status can no longer change to {new_status.value}',
            code='INVALID_STATUS_TRANSITION',
        )


def plan_status_change(
    flight: FlightEntity,
    new_status: FlightStatus,
    reason: Optional[str],
    now: datetime,
) -> Dict[str, Any]:
    """
    Column changes for a status update.

    Returns an empty dict when re-applying the current terminal status.
    """
    check_status_transition(flight.status, new_status)
    if flight.status.is_terminal:
        return {}

    changes: Dict[str, Any] = {'status': new_status}
    if new_status == FlightStatus.DELAYED:
        if not reason or not reason.strip():
            raise ValidationError.for_field(
                'reason', 'A delay reason is required', 'DELAY_REASON_REQUIRED'
            )
        changes['delay_reason'] = reason.strip()
    elif new_status == FlightStatus.DEPARTED:
        changes['actual_departure_time'] = now
    elif new_status == FlightStatus.ARRIVED:
        changes['actual_arrival_time'] = now
    return changes


def touches_schedule(changes: Mapping[str, Any]) -> bool:
    return any(changes.get(field) is not None for field in SCHEDULE_FIELDS)


def check_schedule_change(
    flight: FlightEntity,
    *,
    new_departure: Optional[datetime],
    new_arrival: Optional[datetime],
    booking_count: int,
    tolerance: timedelta = DEFAULT_SCHEDULE_TOLERANCE,
) -> None:
    if new_departure is None and new_arrival is None:
        return
    if booking_count <= 0:
        return

    departure = new_departure if new_departure is not None else flight.departure_time
    if abs(departure - flight.departure_time) > tolerance:
        hours = tolerance.total_seconds() / 3600
        raise ConflictError(
            f'Cannot change departure time by more than {hours:g} hours when bookings exist',
            code='TIME_CHANGE_RESTRICTED',
        )


def plan_flight_update(flight: FlightEntity, changes: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a partial update and return the normalized column changes.

    The resulting flight must still satisfy the route and time invariants.
    """
    rejected = sorted(set(changes) - UPDATABLE_FIELDS)
    if rejected:
        raise ValidationError(
            'Some fields cannot be updated',
            errors=[
                {'field': name, 'message': 'Field is not updatable', 'code': 'FIELD_NOT_UPDATABLE'}
                for name in rejected
            ],
        )

    updated = attrs.evolve(flight, **dict(changes))
    validate_route_and_times(
        departure_airport_id=updated.departure_airport_id,
        arrival_airport_id=updated.arrival_airport_id,
        departure_time=updated.departure_time,
        arrival_time=updated.arrival_time,
    )
    validate_base_price(updated.base_price)
    return {name: getattr(updated, name) for name in changes}
