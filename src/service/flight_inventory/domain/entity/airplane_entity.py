from typing import Dict, Optional

import attrs


@attrs.define
class AirplaneEntity:
    id: int
    model_number: str
    capacity: int
    airline_id: Optional[int] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    # class name -> seat count; None means all-economy at capacity
    seat_configuration: Optional[Dict[str, int]] = None
