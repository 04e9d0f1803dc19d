"""Glossary Schemas — glossaries, concepts, terms, import/export and concordance search.

Invariants:
    - GlossariesListOptions.group_id=0 is sent (root group); None is omitted
    - GlossaryImportRequest requires a positive storageId
    - Concordance search requires both languages and at least one expression
    - ClearGlossaryOptions is a plain filter (no pagination)
"""

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    QueryOptions,
    Request,
)


# --- Concepts -----------------------------------------------------------------

class ConceptLanguagesDetails(CrowdinModel):
    language_id: str = ""
    user_id: int = 0
    definition: str = ""
    note: str = ""
    created_at: str = ""
    updated_at: str = ""


class Concept(CrowdinModel):
    """Glossary concept grouping the terms that translate one another."""
    id: int = 0
    user_id: int = 0
    glossary_id: int = 0
    subject: str = ""
    definition: str = ""
    translatable: bool = False
    note: str = ""
    url: str = ""
    figure: str = ""
    languages_details: list[ConceptLanguagesDetails] = []
    created_at: str = ""
    updated_at: str = ""


ConceptResponse = DataResponse[Concept]
ConceptsListResponse = ListResponse[Concept]


class ConceptsListOptions(ListOptions):
    order_by: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        return params


class LanguagesDetails(CrowdinModel):
    language_id: str | None = None
    definition: str | None = None
    note: str | None = None


class ConceptUpdateRequest(Request):
    """Every field is optional; the request is always valid."""
    subject: str | None = None
    definition: str | None = None
    translatable: bool | None = None
    note: str | None = None
    url: str | None = None
    figure: str | None = None
    languages_details: list[LanguagesDetails] | None = None


# --- Glossaries ---------------------------------------------------------------

class Glossary(CrowdinModel):
    id: int = 0
    name: str = ""
    group_id: int = 0
    user_id: int = 0
    terms: int = 0
    language_id: str = ""
    language_ids: list[str] = []
    default_project_ids: list[int] = []
    project_ids: list[int] = []
    web_url: str = ""
    created_at: str = ""


GlossaryResponse = DataResponse[Glossary]
GlossariesListResponse = ListResponse[Glossary]


class GlossariesListOptions(ListOptions):
    order_by: str = ""
    group_id: int | None = None
    user_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.group_id is not None:
            params["groupId"] = str(self.group_id)
        if self.user_id != 0:
            params["userId"] = str(self.user_id)
        return params


class GlossaryAddRequest(Request):
    name: str = ""
    language_id: str = ""
    group_id: int | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.language_id:
            raise RequestValidationError("languageId is required")


# --- Export / import ----------------------------------------------------------

class GlossaryExportAttributes(CrowdinModel):
    format: str = ""
    export_fields: list[str] = []


class GlossaryExport(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: GlossaryExportAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


GlossaryExportResponse = DataResponse[GlossaryExport]


class GlossaryExportRequest(Request):
    """format: tbx, csv or xlsx; exportFields selects columns. Always valid."""
    format: str | None = None
    export_fields: list[str] | None = None


class GlossaryImportAttributes(CrowdinModel):
    storage_id: int = 0
    scheme: dict[str, int] = {}
    first_line_contains_header: bool = False


class GlossaryImport(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: GlossaryImportAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


GlossaryImportResponse = DataResponse[GlossaryImport]


class GlossaryImportRequest(Request):
    storage_id: int = 0
    scheme: dict[str, int] | None = None
    first_line_contains_header: bool | None = None

    def validate(self) -> None:
        if self.storage_id <= 0:
            raise RequestValidationError("storageId is required")


# --- Terms --------------------------------------------------------------------

class Term(CrowdinModel):
    id: int = 0
    user_id: int = 0
    glossary_id: int = 0
    language_id: str = ""
    text: str = ""
    description: str = ""
    part_of_speech: str = ""
    status: str = ""
    type: str = ""
    gender: str = ""
    note: str = ""
    url: str = ""
    concept_id: int = 0
    lemma: str = ""
    created_at: str = ""
    updated_at: str = ""


TermResponse = DataResponse[Term]
TermsListResponse = ListResponse[Term]


class TermsListOptions(ListOptions):
    order_by: str = ""
    user_id: int = 0
    language_id: str = ""
    concept_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.user_id != 0:
            params["userId"] = str(self.user_id)
        if self.language_id:
            params["languageId"] = self.language_id
        if self.concept_id != 0:
            params["conceptId"] = str(self.concept_id)
        return params


class TermAddRequest(Request):
    language_id: str = ""
    text: str = ""
    description: str | None = None
    part_of_speech: str | None = None
    status: str | None = None
    type: str | None = None
    gender: str | None = None
    note: str | None = None
    url: str | None = None
    concept_id: int | None = None

    def validate(self) -> None:
        if not self.language_id:
            raise RequestValidationError("languageId is required")
        if not self.text:
            raise RequestValidationError("text is required")


class ClearGlossaryOptions(QueryOptions):
    """Filter for clearing terms out of a glossary."""
    language_id: str = ""
    concept_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.language_id:
            params["languageId"] = self.language_id
        if self.concept_id != 0:
            params["conceptId"] = str(self.concept_id)
        return params


# --- Concordance search -------------------------------------------------------

class ConcordanceSearchGlossary(CrowdinModel):
    id: int = 0
    name: str = ""


class ConcordanceSearchConcept(CrowdinModel):
    id: int = 0
    subject: str = ""
    definition: str = ""
    translatable: bool = False
    note: str = ""
    url: str = ""
    figure: str = ""


class ConcordanceSearch(CrowdinModel):
    glossary: ConcordanceSearchGlossary | None = None
    concept: ConcordanceSearchConcept | None = None
    source_terms: list[Term] = []
    target_terms: list[Term] = []


GlossaryConcordanceSearchResponse = ListResponse[ConcordanceSearch]


class GlossaryConcordanceSearchRequest(Request):
    source_language_id: str = ""
    target_language_id: str = ""
    expressions: list[str] = []

    def validate(self) -> None:
        if not self.source_language_id:
            raise RequestValidationError("sourceLanguageId is required")
        if not self.target_language_id:
            raise RequestValidationError("targetLanguageId is required")
        if not self.expressions:
            raise RequestValidationError("expressions cannot be empty")
