"""Languages — custom language add/edit validation.

Tests cover:
    - AddLanguageRequest error order, textDirection presence and value
    - EditLanguageRequest op, path and value shape checks
"""

import pytest

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.core.validate_request import validate_request
from crowdin_sdk.schemas.languages import (
    AddLanguageRequest,
    EditLanguageRequest,
    LanguagesGetResponse,
    TextDirection,
)

LANG = {"name": "Test", "code": "en", "locale_code": "en_US", "three_letters_code": "eng"}


def assert_invalid(req, message):
    with pytest.raises(RequestValidationError) as exc:
        validate_request(req)
    assert str(exc.value) == message


@pytest.mark.parametrize("req, message", [
    (AddLanguageRequest(), "name is required"),
    (AddLanguageRequest(name="Test"), "code is required"),
    (AddLanguageRequest(name="Test", code="en"), "localeCode is required"),
    (AddLanguageRequest(name="Test", code="en", locale_code="en_US"), "threeLettersCode is required"),
    (AddLanguageRequest(**LANG), "pluralCategoryNames is required"),
    (AddLanguageRequest(**LANG, plural_category_names=["one"]), "textDirection is required"),
    (
        AddLanguageRequest(**LANG, plural_category_names=["one"], text_direction="up"),
        'textDirection must be "ltr" or "rtl"',
    ),
])
def test_add_language_errors(req, message):
    assert_invalid(req, message)


@pytest.mark.parametrize("direction", [TextDirection.LTR, "rtl"])
def test_add_language_valid(direction):
    req = AddLanguageRequest(**LANG, plural_category_names=["one", "other"], text_direction=direction)
    validate_request(req)
    assert req.to_payload()["localeCode"] == "en_US"


@pytest.mark.parametrize("req, message", [
    (EditLanguageRequest(), "op is required"),
    (EditLanguageRequest(op="add"), 'op must be "replace" or "test"'),
    (EditLanguageRequest(op="replace"), "path is required"),
    (EditLanguageRequest(op="replace", path="/name"), "value is required"),
    (EditLanguageRequest(op="replace", path="/name", value=1), "value must be a string or an array of strings"),
    (
        EditLanguageRequest(op="test", path="/pluralCategoryNames", value=["one", 2]),
        "value must be a string or an array of strings",
    ),
])
def test_edit_language_errors(req, message):
    assert_invalid(req, message)


def test_edit_language_valid():
    validate_request(EditLanguageRequest(op="replace", path="/name", value="Custom"))
    validate_request(EditLanguageRequest(op="test", path="/pluralCategoryNames", value=["one", "other"]))


def test_language_decodes():
    resp = LanguagesGetResponse.from_payload({"data": {
        "id": "es", "name": "Spanish", "twoLettersCode": "es", "pluralCategoryNames": ["one"],
        "textDirection": "ltr",
    }})
    assert resp.data.two_letters_code == "es"
    assert resp.data.text_direction == TextDirection.LTR
