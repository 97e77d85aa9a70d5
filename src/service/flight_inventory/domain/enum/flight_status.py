from enum import StrEnum


class FlightStatus(StrEnum):
    SCHEDULED = 'scheduled'
    BOARDING = 'boarding'
    DEPARTED = 'departed'
    IN_FLIGHT = 'in-flight'
    ARRIVED = 'arrived'
    DELAYED = 'delayed'
    CANCELLED = 'cancelled'

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({FlightStatus.ARRIVED, FlightStatus.CANCELLED})

# Only these statuses are offered to customers in search results
SEARCHABLE_STATUSES = (FlightStatus.SCHEDULED, FlightStatus.BOARDING)
