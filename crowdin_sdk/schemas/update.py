"""Patch Requests — JSON Patch (RFC 6902) operations used by every edit endpoint.

Invariants:
    - op must be one of add, replace, remove, test (checked first, even when empty)
    - path is always required; value is required for every op except remove
"""

from enum import Enum
from typing import Any

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import Request


class Op(str, Enum):
    """Patch operation."""
    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"
    TEST = "test"


_OPS = ", ".join(op.value for op in Op)


class UpdateRequest(Request):
    """One patch operation; value may be a bool, int, str, list or object."""
    op: str = ""
    path: str = ""
    value: Any = None

    def validate(self) -> None:
        if self.op not in {op.value for op in Op}:
            raise RequestValidationError(f'invalid op: "{self.op}", must be one of {_OPS}')
        if not self.path:
            raise RequestValidationError("path is required")
        if self.value is None and self.op != Op.REMOVE:
            raise RequestValidationError("value is required")
