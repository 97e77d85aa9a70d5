from enum import StrEnum


class SeatClass(StrEnum):
    """Fare tier; declaration order is the seat-layout row order"""

    ECONOMY = 'economy'
    PREMIUM_ECONOMY = 'premium-economy'
    BUSINESS = 'business'
    FIRST = 'first'

    @classmethod
    def parse(cls, value: str) -> 'SeatClass':
        # Airplane configs written by older fleet tooling use camelCase
        if value == 'premiumEconomy':
            return cls.PREMIUM_ECONOMY
        return cls(value)


# Explicit row-assignment order for seat generation
SEAT_CLASS_ORDER: tuple[SeatClass, ...] = (
    SeatClass.ECONOMY,
    SeatClass.PREMIUM_ECONOMY,
    SeatClass.BUSINESS,
    SeatClass.FIRST,
)
