from typing import Optional

import attrs


@attrs.define
class AirlineEntity:
    id: int
    name: str
    code: str
    country: Optional[str] = None
