"""Glossaries — list/filter encoding, nullable groupId and request validation.

Tests cover:
    - groupId=0 is sent for the root group, omitted when unset
    - Terms and ClearGlossary filters encode sorted by key
    - Add, import, concordance search and term validation messages
"""

import pytest

from crowdin_sdk.core.encode_query import encode
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.glossaries import (
    ClearGlossaryOptions,
    ConceptsListOptions,
    ConceptUpdateRequest,
    GlossariesListOptions,
    GlossaryAddRequest,
    GlossaryConcordanceSearchRequest,
    GlossaryConcordanceSearchResponse,
    GlossaryExportRequest,
    GlossaryImportRequest,
    TermAddRequest,
    TermsListOptions,
)


# ─── List options ────────────────────────────────────────────────

def test_concepts_list_options():
    query, ok = ConceptsListOptions(order_by="name", limit=10, offset=5).values()
    assert ok is True
    assert encode(query) == "limit=10&offset=5&orderBy=name"


@pytest.mark.parametrize("opts, expected, ok", [
    (GlossariesListOptions(), "", False),
    (GlossariesListOptions(group_id=0), "groupId=0", True),
    (GlossariesListOptions(user_id=1), "userId=1", True),
    (
        GlossariesListOptions(order_by="name", group_id=1, limit=10, offset=5),
        "groupId=1&limit=10&offset=5&orderBy=name",
        True,
    ),
])
def test_glossaries_list_options(opts, expected, ok):
    query, has = opts.values()
    assert encode(query) == expected
    assert has is ok


def test_terms_list_options():
    opts = TermsListOptions(
        order_by="name", user_id=1, language_id="en", concept_id=2, limit=10, offset=5,
    )
    query, _ = opts.values()
    assert encode(query) == "conceptId=2&languageId=en&limit=10&offset=5&orderBy=name&userId=1"


def test_clear_glossary_options():
    query, ok = ClearGlossaryOptions(language_id="en", concept_id=2).values()
    assert ok is True
    assert encode(query) == "conceptId=2&languageId=en"
    assert ClearGlossaryOptions().values()[1] is False


# ─── Requests ────────────────────────────────────────────────────

def test_glossary_add_request():
    with pytest.raises(RequestValidationError, match="^name is required$"):
        GlossaryAddRequest(language_id="uk").validate()
    with pytest.raises(RequestValidationError, match="^languageId is required$"):
        GlossaryAddRequest(name="Terms").validate()
    req = GlossaryAddRequest(name="Terms", language_id="uk", group_id=0)
    req.validate()
    assert req.to_payload() == {"name": "Terms", "languageId": "uk", "groupId": 0}


def test_always_valid_requests():
    ConceptUpdateRequest().validate()
    GlossaryExportRequest(format="tbx", export_fields=["term"]).validate()


@pytest.mark.parametrize("storage_id", [0, -1])
def test_import_requires_storage(storage_id):
    with pytest.raises(RequestValidationError, match="^storageId is required$"):
        GlossaryImportRequest(storage_id=storage_id).validate()


def test_import_payload():
    req = GlossaryImportRequest(storage_id=1, scheme={"en": 0}, first_line_contains_header=True)
    req.validate()
    assert req.to_payload() == {
        "storageId": 1, "scheme": {"en": 0}, "firstLineContainsHeader": True,
    }


@pytest.mark.parametrize("kwargs, message", [
    ({}, "sourceLanguageId is required"),
    ({"source_language_id": "en"}, "targetLanguageId is required"),
    ({"source_language_id": "en", "target_language_id": "uk"}, "expressions cannot be empty"),
    (
        {"source_language_id": "en", "target_language_id": "uk", "expressions": []},
        "expressions cannot be empty",
    ),
])
def test_concordance_search_request(kwargs, message):
    with pytest.raises(RequestValidationError, match=f"^{message}$"):
        GlossaryConcordanceSearchRequest(**kwargs).validate()


def test_term_add_request():
    with pytest.raises(RequestValidationError, match="^languageId is required$"):
        TermAddRequest(text="Hello").validate()
    with pytest.raises(RequestValidationError, match="^text is required$"):
        TermAddRequest(language_id="en").validate()
    TermAddRequest(language_id="en", text="Hello", part_of_speech="noun").validate()


# ─── Entities ────────────────────────────────────────────────────

def test_concordance_search_decodes():
    resp = GlossaryConcordanceSearchResponse.from_payload({
        "data": [{"data": {
            "glossary": {"id": 2, "name": "Be My Eyes iOS's Glossary"},
            "concept": {"id": 1, "subject": "general", "translatable": True},
            "sourceTerms": [{"id": 2, "languageId": "en", "text": "Voir"}],
            "targetTerms": [{"id": 3, "languageId": "fr", "text": "Voir"}],
        }}],
        "pagination": {"offset": 0, "limit": 25},
    })
    [item] = resp.items()
    assert item.glossary.name == "Be My Eyes iOS's Glossary"
    assert item.concept.translatable is True
    assert item.target_terms[0].language_id == "fr"
