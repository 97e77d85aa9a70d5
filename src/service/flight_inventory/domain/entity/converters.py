"""
attrs converters shared by the flight inventory entities.

They let an entity be rebuilt from its own `attrs.asdict` output after a JSON
round trip (ISO strings back to datetimes, decimal strings back to Decimal,
nested dicts back to entities).
"""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional, TypeVar


_E = TypeVar('_E')


def ensure_utc(value: datetime) -> datetime:
    """Naive timestamps (e.g. read back from SQLite) are stored as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_datetime(value: datetime | str) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return ensure_utc(value)


def to_optional_datetime(value: datetime | str | None) -> Optional[datetime]:
    return None if value is None else to_datetime(value)


def to_date(value: date | str) -> date:
    if isinstance(value, str):
        return date.fromisoformat(value)
    return value


def to_optional_date(value: date | str | None) -> Optional[date]:
    return None if value is None else to_date(value)


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_entity(entity_cls: type[_E]) -> Callable[[Any], Optional[_E]]:
    def convert(value: Any) -> Optional[_E]:
        if value is None or isinstance(value, entity_cls):
            return value
        return entity_cls(**value)

    return convert


def to_entity_list(entity_cls: type[_E]) -> Callable[[Any], list[_E]]:
    convert = to_entity(entity_cls)

    def convert_all(values: Any) -> list[_E]:
        return [convert(v) for v in values]  # type: ignore[misc]

    return convert_all
