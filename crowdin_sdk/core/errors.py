"""Error Hierarchy — typed, categorized exceptions for every Crowdin SDK failure mode.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory)
    - Validation errors carry exactly one violated precondition, message only
    - NilRequestError message is always NIL_REQUEST_MESSAGE, whatever the request type
    - API errors keep the decoded response body they were built from

Design Decisions:
    - Single hierarchy with CrowdinError base: callers catch one type (ADR: uniform error shape)
    - Message text is public contract: existing callers match on it, so no prefixes are added
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crowdin_sdk.schemas.errors import (
        ErrorResponse,
        GraphQLErrorResponse,
        ValidationErrorResponse,
    )


NIL_REQUEST_MESSAGE = "request cannot be nil"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    API = "api"
    DECODE = "decode"


class CrowdinError(Exception):
    """Base exception for all Crowdin SDK errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_dict(self) -> dict:
        """Convert to a plain dict for logging or re-serialization."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "http_status": self.http_status,
            }
        }


# ─── Request Validation Errors ──────────────────────────────────

class RequestValidationError(CrowdinError):
    """Outgoing request failed a local precondition check."""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR", ErrorCategory.VALIDATION)


class NilRequestError(RequestValidationError):
    """Request value was absent (None)."""
    def __init__(self):
        super().__init__(NIL_REQUEST_MESSAGE)
        self.code = "NIL_REQUEST"


# ─── Decode Errors ──────────────────────────────────────────────

class DecodeError(CrowdinError):
    """Response payload could not be decoded into its model."""
    def __init__(self, message: str):
        super().__init__(message, "DECODE_ERROR", ErrorCategory.DECODE)


# ─── API Errors (non-2xx responses) ─────────────────────────────

class CrowdinAPIError(CrowdinError):
    """API returned a generic error envelope: {"error": {"code", "message"}}."""
    def __init__(self, response: "ErrorResponse", http_status: int | None = None):
        super().__init__(
            response.render(), "API_ERROR", ErrorCategory.API, http_status,
        )
        self.response = response


class CrowdinValidationAPIError(CrowdinError):
    """API rejected the request body with per-field validation errors."""
    def __init__(
        self, response: "ValidationErrorResponse", http_status: int | None = None,
    ):
        super().__init__(
            response.render(), "API_VALIDATION_ERROR", ErrorCategory.API, http_status,
        )
        self.response = response


class GraphQLAPIError(CrowdinError):
    """GraphQL endpoint returned one or more errors."""
    def __init__(
        self, response: "GraphQLErrorResponse", http_status: int | None = None,
    ):
        super().__init__(
            response.render(), "GRAPHQL_ERROR", ErrorCategory.API, http_status,
        )
        self.response = response
