"""Translation Memory Schemas — TMs, segments, import/export and concordance search.

Invariants:
    - TranslationMemoryExportRequest accepts only tmx, csv or xlsx when a format is set
    - TMConcordanceSearchRequest requires an explicit autoSubstitution and minRelevant > 0
    - TMSegmentCreateRequest requires at least one record
"""

from enum import Enum

from pydantic import Field

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class TMExportFormat(str, Enum):
    TMX = "tmx"
    CSV = "csv"
    XLSX = "xlsx"


class TranslationMemory(CrowdinModel):
    id: int = 0
    user_id: int = 0
    name: str = ""
    language_id: str = ""
    language_ids: list[str] = []
    segments_count: int = 0
    default_project_ids: list[int] = []
    project_ids: list[int] = []
    web_url: str = ""
    created_at: str = ""


TranslationMemoryResponse = DataResponse[TranslationMemory]
TranslationMemoriesListResponse = ListResponse[TranslationMemory]


class TranslationMemoriesListOptions(ListOptions):
    order_by: str = ""
    user_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.user_id > 0:
            params["userId"] = str(self.user_id)
        return params


class TranslationMemoryAddRequest(Request):
    name: str = ""
    language_id: str = ""
    group_id: int | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.language_id:
            raise RequestValidationError("languageId is required")


# ─── Export / import ─────────────────────────────────────────────

class TranslationMemoryExportAttributes(CrowdinModel):
    source_language_id: str = ""
    target_language_id: str = ""
    format: str = ""


class TranslationMemoryExport(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: TranslationMemoryExportAttributes = Field(
        default_factory=TranslationMemoryExportAttributes,
    )
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


TranslationMemoryExportResponse = DataResponse[TranslationMemoryExport]


class TranslationMemoryExportRequest(Request):
    source_language_id: str | None = None
    target_language_id: str | None = None
    format: str | None = None

    def validate(self) -> None:
        if self.format and self.format not in {f.value for f in TMExportFormat}:
            raise RequestValidationError(f'unsupported format: "{self.format}"')


class TranslationMemoryImportAttributes(CrowdinModel):
    tm_id: int = 0
    storage_id: int = 0
    first_line_contains_header: bool = False
    scheme: dict[str, int] = {}


class TranslationMemoryImport(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: TranslationMemoryImportAttributes = Field(
        default_factory=TranslationMemoryImportAttributes,
    )
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


TranslationMemoryImportResponse = DataResponse[TranslationMemoryImport]


class TranslationMemoryImportRequest(Request):
    """scheme maps a language id to its column index (csv/xlsx only)."""
    storage_id: int = 0
    first_line_contains_header: bool | None = None
    scheme: dict[str, int] | None = None

    def validate(self) -> None:
        if self.storage_id <= 0:
            raise RequestValidationError("storageId is required")


# ─── Concordance search ──────────────────────────────────────────

class TMConcordanceSearchRequest(Request):
    source_language_id: str = ""
    target_language_id: str = ""
    auto_substitution: bool | None = None
    min_relevant: int = 0
    expressions: list[str] = []

    def validate(self) -> None:
        if not self.source_language_id:
            raise RequestValidationError("sourceLanguageId is required")
        if not self.target_language_id:
            raise RequestValidationError("targetLanguageId is required")
        if self.auto_substitution is None:
            raise RequestValidationError("autoSubstitution is required")
        if self.min_relevant <= 0:
            raise RequestValidationError("minRelevant is required")
        if not self.expressions:
            raise RequestValidationError("expressions cannot be empty")


class ConcordanceSearchTM(CrowdinModel):
    id: int = 0
    name: str = ""


class TMConcordanceSearch(CrowdinModel):
    tm: ConcordanceSearchTM = Field(default_factory=ConcordanceSearchTM)
    record_id: int = 0
    source: str = ""
    target: str = ""
    relevant: int = 0
    substituted: str = ""
    updated_at: str = ""


TMConcordanceSearchResponse = ListResponse[TMConcordanceSearch]


# ─── Segments ────────────────────────────────────────────────────

class TMSegmentRecord(CrowdinModel):
    id: int = 0
    language_id: str = ""
    text: str = ""
    usage_count: int = 0
    created_by: int = 0
    updated_by: int = 0
    created_at: str = ""
    updated_at: str = ""


class TMSegment(CrowdinModel):
    id: int = 0
    records: list[TMSegmentRecord | None] = []


TMSegmentResponse = DataResponse[TMSegment]
TMSegmentsListResponse = ListResponse[TMSegment]


class TMSegmentsListOptions(ListOptions):
    """croql filters segments with a CroQL expression."""
    order_by: str = ""
    croql: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.croql:
            params["croql"] = self.croql
        return params


class TMSegmentCreateRecord(CrowdinModel):
    language_id: str = ""
    text: str = ""


class TMSegmentCreateRequest(Request):
    records: list[TMSegmentCreateRecord] = []

    def validate(self) -> None:
        if not self.records:
            raise RequestValidationError("records is required")
