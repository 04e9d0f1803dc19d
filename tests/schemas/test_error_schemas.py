"""API error envelopes — rendering and response-body mapping.

Tests cover:
    - ErrorResponse "<code> <message>" rendering
    - ValidationErrorResponse rendering, including unknown codes and no errors
    - GraphQL error rendering with locations
    - parse_error_response dispatch by body shape, 2xx passthrough, raw bodies
"""

import json

import pytest

from crowdin_sdk.core.errors import (
    CrowdinAPIError,
    CrowdinValidationAPIError,
    ErrorCategory,
    GraphQLAPIError,
)
from crowdin_sdk.schemas.errors import (
    Error,
    ErrorResponse,
    GraphQLErrorResponse,
    ValidationErrorResponse,
    parse_error_response,
)


def validation_body(*entries):
    return {
        "errors": [
            {"error": {"key": key, "errors": [{"code": c, "message": m} for c, m in errors]}}
            for key, errors in entries
        ]
    }


# -- Rendering -----------------------------------------------------------------


def test_error_response_render():
    resp = ErrorResponse(error=Error(code=404, message="Resource Not Found"))
    assert resp.render() == "404 Resource Not Found"


def test_validation_error_response_render():
    resp = ValidationErrorResponse.model_validate(validation_body(
        ("name", [("isEmpty", "Value is required and can't be empty")]),
        ("sourceLanguage", [("required", "Field is required"), ("notFound", "Field not found")]),
    ))
    assert resp.render() == (
        "name: Value is required and can't be empty (isEmpty); "
        "sourceLanguage: Field is required (required), Field not found (notFound)"
    )


def test_validation_error_single():
    resp = ValidationErrorResponse.model_validate(
        validation_body(("name", [("required", "name is required")])),
    )
    assert resp.render() == "name: name is required (required)"


def test_validation_error_empty():
    assert ValidationErrorResponse(errors=[]).render() == ""


def test_graphql_error_render():
    resp = GraphQLErrorResponse.model_validate({
        "errors": [{
            "message": 'Cannot query field "test" on type "Project".',
            "locations": [{"line": 7, "column": 8}],
        }]
    })
    assert resp.render() == 'Cannot query field "test" on type "Project"., Locations: [{Line:7 Column:8}]'


# -- parse_error_response ------------------------------------------------------


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_success_is_not_an_error(status):
    assert parse_error_response(status, b'{"data": {}}') is None


@pytest.mark.parametrize("status, message", [
    (404, "Resource Not Found"),
    (403, "Forbidden"),
    (401, "Unauthorized"),
])
def test_generic_error_envelope(status, message):
    body = json.dumps({"error": {"message": message, "code": status}})
    err = parse_error_response(status, body.encode())
    assert isinstance(err, CrowdinAPIError)
    assert err.http_status == status
    assert err.response.error.code == status
    assert str(err) == f"{status} {message}"
    assert err.category is ErrorCategory.API


@pytest.mark.parametrize("body, message", [
    (
        validation_body(("credentials", [
            (0, "The server returned the following message: Translator API Authorization Failed."),
        ])),
        "credentials: The server returned the following message: Translator API Authorization Failed. (0)",
    ),
    (
        validation_body(
            ("name", [("isEmpty", "Value is required and can't be empty")]),
            ("type", [("notInArray", "The input was not found in the haystack")]),
        ),
        "name: Value is required and can't be empty (isEmpty); "
        "type: The input was not found in the haystack (notInArray)",
    ),
    (validation_body(("msg", [(True, "Test error")])), "msg: Test error (n/a)"),
])
def test_validation_error_body(body, message):
    err = parse_error_response(400, json.dumps(body))
    assert isinstance(err, CrowdinValidationAPIError)
    assert err.http_status == 400
    assert err.response.status == 400
    assert str(err) == message


def test_graphql_error_body():
    body = {"errors": [{"message": "Syntax Error", "locations": [{"line": 1, "column": 2}]}]}
    err = parse_error_response(400, json.dumps(body))
    assert isinstance(err, GraphQLAPIError)
    assert str(err) == "Syntax Error, Locations: [{Line:1 Column:2}]"


def test_raw_body_kept_verbatim():
    err = parse_error_response(502, b"Bad Gateway")
    assert isinstance(err, CrowdinAPIError)
    assert err.response.error.code == ""
    assert err.response.error.message == "Bad Gateway"
    assert err.http_status == 502


def test_empty_body():
    err = parse_error_response(500, b"")
    assert isinstance(err, CrowdinAPIError)
    assert err.http_status == 500
