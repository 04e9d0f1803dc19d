"""API Error Schemas — decoded error envelopes and their mapping to SDK exceptions.

Invariants:
    - Error.code is int or str when the API sent one of those, None otherwise
    - ErrorResponse renders "<code> <message>"
    - ValidationErrorResponse renders "key: msg (code), msg (code); key: ..." with
      "n/a" for a missing/unknown code
    - GraphQLErrorResponse renders each error as "<message>, Locations: [...]" joined by "; "
    - parse_error_response returns None for 2xx and never raises on malformed bodies

Design Decisions:
    - render() lives on the models so exceptions stay thin wrappers (ADR: data owns its text)
    - Undecodable bodies become the message verbatim with an empty code
"""

import json
import logging
from typing import Any

from pydantic import Field, ValidationError as PydanticValidationError

from crowdin_sdk.core.domain_types import ErrorCode
from crowdin_sdk.core.errors import (
    CrowdinAPIError,
    CrowdinError,
    CrowdinValidationAPIError,
    GraphQLAPIError,
)
from crowdin_sdk.schemas.base import CrowdinModel

logger = logging.getLogger(__name__)


def _render_code(code: int | str | None) -> str:
    if code is None:
        return "n/a"
    return str(code)


class Error(CrowdinModel):
    """Error body: code may arrive as an integer or a string."""
    code: ErrorCode = None
    message: str = ""


class ErrorResponse(CrowdinModel):
    """Generic error envelope: {"error": {"code": ..., "message": ...}}."""
    error: Error = Field(default_factory=Error)

    def render(self) -> str:
        code = "" if self.error.code is None else self.error.code
        return f"{code} {self.error.message}"


class ValidationErrorDetail(CrowdinModel):
    """Errors reported for one request key."""
    key: str = ""
    errors: list[Error] = []


class ValidationError(CrowdinModel):
    """One entry of a validation error response."""
    error: ValidationErrorDetail = Field(default_factory=ValidationErrorDetail)


class ValidationErrorResponse(CrowdinModel):
    """Invalid request body response: {"errors": [{"error": {"key", "errors"}}]}."""
    errors: list[ValidationError] = []
    status: int = 0

    def render(self) -> str:
        parts = []
        for item in self.errors:
            details = ", ".join(
                f"{e.message} ({_render_code(e.code)})" for e in item.error.errors
            )
            parts.append(f"{item.error.key}: {details}")
        return "; ".join(parts)


class GraphQLLocation(CrowdinModel):
    line: int = 0
    column: int = 0


class GraphQLError(CrowdinModel):
    """A single GraphQL error."""
    message: str = ""
    extensions: dict[str, Any] | None = None
    locations: list[GraphQLLocation] = []

    def render(self) -> str:
        locations = " ".join(
            f"{{Line:{loc.line} Column:{loc.column}}}" for loc in self.locations
        )
        return f"{self.message}, Locations: [{locations}]"


class GraphQLErrorResponse(CrowdinModel):
    """GraphQL error response: {"errors": [{"message", "locations", ...}]}."""
    errors: list[GraphQLError] = []

    def render(self) -> str:
        return "; ".join(e.render() for e in self.errors)


# --- Response mapping ---------------------------------------------------------

def _is_validation_body(payload: dict) -> bool:
    errors = payload.get("errors")
    return (
        isinstance(errors, list)
        and bool(errors)
        and all(isinstance(e, dict) and isinstance(e.get("error"), dict) for e in errors)
    )


def _is_graphql_body(payload: dict) -> bool:
    errors = payload.get("errors")
    return (
        isinstance(errors, list)
        and bool(errors)
        and all(isinstance(e, dict) and "message" in e for e in errors)
    )


def _raw_error(text: str, status_code: int) -> CrowdinAPIError:
    response = ErrorResponse(error=Error(code="", message=text))
    return CrowdinAPIError(response, status_code)


def parse_error_response(status_code: int, body: bytes | str | None) -> CrowdinError | None:
    """Map a non-2xx response body to the matching SDK exception (None for 2xx)."""
    if 200 <= status_code <= 299:
        return None
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else (body or "")
    try:
        payload = json.loads(text) if text else {}
    except json.JSONDecodeError:
        return _raw_error(text, status_code)
    if not isinstance(payload, dict):
        return _raw_error(text, status_code)

    try:
        if _is_validation_body(payload):
            validation = ValidationErrorResponse.model_validate(payload)
            validation.status = status_code
            error: CrowdinError = CrowdinValidationAPIError(validation, status_code)
        elif _is_graphql_body(payload):
            error = GraphQLAPIError(
                GraphQLErrorResponse.model_validate(payload), status_code,
            )
        else:
            error = CrowdinAPIError(ErrorResponse.model_validate(payload), status_code)
    except PydanticValidationError:
        return _raw_error(text, status_code)

    logger.debug(
        "decoded API error response",
        extra={"status_code": status_code, "error_code": error.code},
    )
    return error
