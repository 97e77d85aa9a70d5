from decimal import Decimal
from typing import Any

import orjson


def _default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return str(obj)
    raise TypeError(f'Type is not JSON serializable: {type(obj).__name__}')


def encode(value: Any) -> bytes:
    # Enum keys (e.g. pricing by seat class) need OPT_NON_STR_KEYS
    return orjson.dumps(value, default=_default, option=orjson.OPT_NON_STR_KEYS)


def decode(raw: bytes | str) -> Any:
    return orjson.loads(raw)
