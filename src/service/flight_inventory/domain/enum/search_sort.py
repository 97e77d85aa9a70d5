from enum import StrEnum


class SortBy(StrEnum):
    """Sort keys accepted from clients"""

    PRICE = 'price'
    DURATION = 'duration'
    DEPARTURE = 'departure'
    ARRIVAL = 'arrival'
    AIRLINE = 'airline'


class SortOrder(StrEnum):
    ASC = 'asc'
    DESC = 'desc'


class SortColumn(StrEnum):
    """Concrete order key the repository sorts on"""

    BASE_PRICE = 'base_price'
    DEPARTURE_TIME = 'departure_time'
    ARRIVAL_TIME = 'arrival_time'
    AIRLINE_NAME = 'airline_name'
