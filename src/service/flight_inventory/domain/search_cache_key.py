"""
Cache keys for search pages and single flights.

A search key is built from every SearchQuery field as sorted `k=v` pairs joined
with `&`, base64 encoded, so equivalent queries collide regardless of the order
in which their parameters arrived.
"""

import base64

from src.service.flight_inventory.domain.value_object.search_query import SearchQuery


SEARCH_KEY_PREFIX = 'search:'
FLIGHT_KEY_PREFIX = 'flight:'


def search_cache_key(query: SearchQuery) -> str:
    fields = query.cache_fields()
    canonical = '&'.join(f'{name}={fields[name]}' for name in sorted(fields))
    return SEARCH_KEY_PREFIX + base64.b64encode(canonical.encode()).decode()


def flight_cache_key(flight_id: int) -> str:
    return f'{FLIGHT_KEY_PREFIX}{flight_id}'
