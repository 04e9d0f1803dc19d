"""Error hierarchy tests — categories, codes and the nil-request sentinel.

Tests cover:
    - RequestValidationError carries the message verbatim, no prefix
    - NilRequestError is a RequestValidationError with a fixed message
    - to_dict shape for logging
"""

import pytest

from crowdin_sdk.core.errors import (
    NIL_REQUEST_MESSAGE,
    CrowdinError,
    DecodeError,
    ErrorCategory,
    NilRequestError,
    RequestValidationError,
)


# -- Validation errors ---------------------------------------------------------


def test_validation_error_message_is_verbatim():
    err = RequestValidationError("name is required")
    assert str(err) == "name is required"
    assert err.message == "name is required"
    assert err.code == "VALIDATION_ERROR"
    assert err.category is ErrorCategory.VALIDATION
    assert err.http_status is None


def test_nil_request_error():
    """Same message whatever request type was expected."""
    err = NilRequestError()
    assert isinstance(err, RequestValidationError)
    assert isinstance(err, CrowdinError)
    assert str(err) == NIL_REQUEST_MESSAGE == "request cannot be nil"
    assert err.code == "NIL_REQUEST"


def test_nil_request_caught_as_validation_error():
    with pytest.raises(RequestValidationError):
        raise NilRequestError()


def test_decode_error_category():
    err = DecodeError("Task decode error: invalid userId value: abc")
    assert err.category is ErrorCategory.DECODE
    assert err.code == "DECODE_ERROR"


# -- Serialization -------------------------------------------------------------


def test_to_dict():
    err = CrowdinError("boom", "API_ERROR", ErrorCategory.API, 502)
    assert err.to_dict() == {
        "error": {
            "code": "API_ERROR",
            "message": "boom",
            "category": "api",
            "http_status": 502,
        }
    }
