"""Request Boundary — nil-aware entry points for validation and query encoding.

Invariants:
    - validate_request(None) always raises NilRequestError, whatever type was expected
    - query_values(None) always returns (empty QueryParams, False)
    - Both delegate to the value's own validate()/values(); no cross-resource logic

Design Decisions:
    - Protocol over ABC: polymorphic payloads (report schemas, file options, format
      settings) satisfy Validatable structurally (ADR: validate-self capability)
"""

from typing import Protocol

import httpx

from crowdin_sdk.core.errors import NilRequestError


class Validatable(Protocol):
    """Anything that can check its own preconditions, raising on the first violation."""
    def validate(self) -> None: ...


class QueryEncodable(Protocol):
    """Anything that renders itself into query parameters."""
    def values(self) -> tuple[httpx.QueryParams, bool]: ...


def validate_request(request: Validatable | None) -> None:
    """Raise NilRequestError for None, otherwise run the request's own checks."""
    if request is None:
        raise NilRequestError()
    request.validate()


def query_values(options: QueryEncodable | None) -> tuple[httpx.QueryParams, bool]:
    """Encode list options; None encodes to nothing."""
    if options is None:
        return httpx.QueryParams(), False
    return options.values()
