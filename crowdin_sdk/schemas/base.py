"""Schema Base — shared model config, request/list-option bases and response envelopes.

Invariants:
    - Every wire shape aliases snake_case attributes to camelCase keys
    - to_payload() omits unset (None) fields and always emits non-optional ones
    - Request.validate() is a no-op unless a subclass adds checks
    - ListOptions contributes limit/offset only when positive; values() is never lossy
      for set fields and never raises

Design Decisions:
    - Requests default required fields to their zero value (""/0/[]) so an empty
      request constructs and validate() reports what is missing (ADR: first error wins)
    - Optional fields are `X | None = None`: None means "omit", 0/False means "send"
    - Generic DataResponse/ListResponse mirror the API's {"data": ...} envelopes once
    - Polymorphic fields resolve plain mappings through resolve_variant: the concrete
      shape is looked up by the request's key field and every key must belong to it,
      so nothing is dropped on the way to the wire (ADR: no silent coercion to a base)
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from crowdin_sdk.core.encode_query import build_query, encode
from crowdin_sdk.core.errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CrowdinModel(BaseModel):
    """Base for every Crowdin wire shape."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body with API key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, data: Any):
        """Decode an API payload, mapping pydantic failures to DecodeError."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            msg = first["msg"].removeprefix("Value error, ")
            raise DecodeError(f"{cls.__name__} decode error: {msg}") from exc


# --- Polymorphic payloads ----------------------------------------------------

def wire_keys(shape: type[BaseModel]) -> set[str]:
    """Attribute names and API key names a shape accepts."""
    keys = set()
    for name, field in shape.model_fields.items():
        keys.add(name)
        keys.add(field.alias or name)
    return keys


def resolve_variant(
    value: Any,
    base: type[CrowdinModel],
    variants: dict[str, type[CrowdinModel]],
    key: Any,
    default: type[CrowdinModel] | None = None,
) -> Any:
    """Map a payload value onto the concrete subclass of base registered for key.

    Instances of a base subclass pass through untouched; a bare base instance or a
    mapping that cannot be placed without losing keys is rejected with ValueError.
    """
    if isinstance(value, base):
        if type(value) is base:
            raise ValueError(f"{base.__name__} carries no fields, use one of its subclasses")
        return value
    if not isinstance(value, Mapping):
        return value
    key = getattr(key, "value", key)
    shape = variants.get(key, default) if isinstance(key, str) else default
    if shape is None:
        raise ValueError(f'no {base.__name__} shape registered for "{key}"')
    unknown = set(value) - wire_keys(shape)
    if unknown:
        raise ValueError(
            f"{shape.__name__} does not accept: {', '.join(sorted(map(str, unknown)))}",
        )
    return shape.model_validate(value)


class Request(CrowdinModel):
    """Base for outgoing request bodies."""

    def validate(self) -> None:
        """Raise RequestValidationError on the first unmet precondition."""
        return None


class QueryOptions(CrowdinModel):
    """Base for option sets rendered into a query string."""

    def query_params(self) -> dict[str, str]:
        return {}

    def values(self) -> tuple[httpx.QueryParams, bool]:
        """Encoded parameters sorted by key, and whether any were produced."""
        query, ok = build_query(self.query_params())
        logger.debug(
            "encoded list options",
            extra={"resource": type(self).__name__, "query": encode(query)},
        )
        return query, ok


class ListOptions(QueryOptions):
    """Pagination shared by every list endpoint."""
    limit: int = 0
    offset: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.limit > 0:
            params["limit"] = str(self.limit)
        if self.offset > 0:
            params["offset"] = str(self.offset)
        return params


class Pagination(CrowdinModel):
    """Pagination block echoed back by list endpoints."""
    offset: int = 0
    limit: int = 0


# --- Response envelopes -------------------------------------------------------

class DataResponse(CrowdinModel, Generic[T]):
    """Single-entity envelope: {"data": {...}}."""
    data: T | None = None


class ListResponse(CrowdinModel, Generic[T]):
    """List envelope: {"data": [{"data": {...}}, ...], "pagination": {...}}."""
    data: list[DataResponse[T]] = []
    pagination: Pagination | None = None

    def items(self) -> list[T]:
        """Unwrapped entities, skipping empty envelopes."""
        return [entry.data for entry in self.data if entry.data is not None]
