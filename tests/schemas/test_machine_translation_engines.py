"""Machine translation engines — list options, add and translate validation.

Tests cover:
    - groupId=0 is kept, None dropped
    - MTAddRequest error order: name, type, credentials
    - TranslateRequest provider rules
    - Credentials keep their snake_case wire keys
"""

import pytest

from crowdin_sdk.core.encode_query import encode
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.machine_translation_engines import (
    LanguageRecognitionProvider,
    MachineTranslationsResponse,
    MTAddRequest,
    MTECredentials,
    MTListOptions,
    TranslateRequest,
)


@pytest.mark.parametrize("opts, expected", [
    (MTListOptions(), ""),
    (MTListOptions(group_id=0), "groupId=0"),
    (MTListOptions(group_id=1), "groupId=1"),
    (MTListOptions(group_id=4, limit=10, offset=1), "groupId=4&limit=10&offset=1"),
])
def test_mt_list_options(opts, expected):
    query, ok = opts.values()
    assert encode(query) == expected
    assert ok is bool(expected)


@pytest.mark.parametrize("req, message", [
    (MTAddRequest(), "name is required"),
    (MTAddRequest(name="Crowdin Translate"), "type is required"),
    (MTAddRequest(name="Crowdin Translate", type="crowdin"), "credentials are required"),
])
def test_mt_add_request_errors(req, message):
    with pytest.raises(RequestValidationError, match=f"^{message}$"):
        req.validate()


def test_mt_add_request_valid():
    req = MTAddRequest(name="Crowdin Translate", type="crowdin", credentials=MTECredentials(api_key="test"))
    req.validate()
    assert req.to_payload() == {
        "name": "Crowdin Translate", "type": "crowdin", "credentials": {"apiKey": "test"},
    }


@pytest.mark.parametrize("req, message", [
    (TranslateRequest(), "target language ID is required"),
    (TranslateRequest(target_language_id="de"), "source language ID or language recognition provider is required"),
    (
        TranslateRequest(target_language_id="de", language_recognition_provider="invalid_provider"),
        "invalid language recognition provider",
    ),
])
def test_translate_request_errors(req, message):
    with pytest.raises(RequestValidationError, match=f"^{message}$"):
        req.validate()


def test_translate_request_valid():
    TranslateRequest(
        source_language_id="en", target_language_id="de",
        language_recognition_provider=LanguageRecognitionProvider.CROWDIN,
        strings=["Hello, World!"],
    ).validate()
    TranslateRequest(target_language_id="de", language_recognition_provider="engine").validate()


def test_machine_translation_decodes_credentials():
    resp = MachineTranslationsResponse.from_payload({"data": {
        "id": 2, "name": "Crowdin Translate", "type": "crowdin",
        "credentials": {"crowdin_nmt": "1", "crowdin_nmt_multi_translations": "0"},
        "supportedLanguagePairs": {"en": ["de", "uk"]},
        "groupId": 0, "isEnabled": True,
    }})
    mt = resp.data
    assert mt.credentials.crowdin_nmt == "1"
    assert mt.supported_language_pairs["en"] == ["de", "uk"]
    assert mt.group_id == 0
