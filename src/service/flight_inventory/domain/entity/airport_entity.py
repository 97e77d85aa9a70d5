from typing import Optional

import attrs


@attrs.define
class AirportEntity:
    id: int
    name: str
    iata_code: str
    city: str
    country: str
    timezone: Optional[str] = None
