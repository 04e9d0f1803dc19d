"""Query Encoding — helpers that turn list-option fields into query parameters.

Invariants:
    - Nothing here raises: malformed optional filters are dropped, never reported
    - List values render as one comma-joined string (bools as true/false, enums as value)
    - build_query orders parameters by key so the encoded string is canonical

Design Decisions:
    - httpx.QueryParams as the multi-map handed to the transport; encode() renders
      the canonical string (",", ":" escaped, space as "+") independent of httpx version
    - Tri-state filters accept only {0, 1}; anything else is silently omitted
"""

from enum import Enum
from typing import Any, Iterable
from urllib.parse import urlencode

import httpx


TRI_STATE_VALUES = (0, 1)


def format_value(value: Any) -> str:
    """Render one scalar the way the API expects it on the wire."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_slice(values: Iterable[Any]) -> str:
    """Join values with commas: [1, 2, 3] -> "1,2,3"."""
    return ",".join(format_value(v) for v in values)


def tri_state(value: int | None) -> str | None:
    """Return the wire form of a {0, 1} filter, or None when unset or out of domain."""
    if value is None or value not in TRI_STATE_VALUES:
        return None
    return str(value)


def build_query(params: dict[str, str]) -> tuple[httpx.QueryParams, bool]:
    """Sort collected parameters by key and report whether any were produced."""
    query = httpx.QueryParams(sorted(params.items()))
    return query, len(params) > 0


def encode(query: httpx.QueryParams) -> str:
    """Canonical query string for logs and comparisons, e.g. "orderBy=createdAt+desc"."""
    return urlencode(query.multi_items())
