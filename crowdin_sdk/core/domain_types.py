"""Domain Types — lenient wire types for fields the API encodes inconsistently.

Invariants:
    - UserId accepts a JSON number or a numeric string; anything else is rejected
      (a numeric string is an optional sign and ASCII digits, nothing else)
    - ErrorCode keeps ints and strings, every other shape decodes to None
    - EmptyListDict decodes the PHP-style empty array `[]` as an empty mapping

Design Decisions:
    - Annotated + BeforeValidator over custom model hooks: the quirk travels with the
      field type, so every model using it gets the same decoding (ADR: explicit per-field quirks)
    - These are compatibility requirements of the remote API, not bugs to fix
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator


_NUMERIC = re.compile(r"[+-]?[0-9]+")


def _coerce_user_id(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _NUMERIC.fullmatch(value):
        return int(value)
    raise ValueError(f"invalid userId value: {value}")


def _coerce_error_code(value: Any) -> int | str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, str)):
        return value
    return None


def _empty_list_as_dict(value: Any) -> Any:
    if isinstance(value, list) and not value:
        return {}
    return value


UserId = Annotated[int, BeforeValidator(_coerce_user_id)]
ErrorCode = Annotated[int | str | None, BeforeValidator(_coerce_error_code)]
EmptyListDict = BeforeValidator(_empty_list_as_dict)
