"""Translation Schemas — pre-translation, builds, uploads and exports.

Invariants:
    - PreTranslationRequest requires languages and files, plus the engine or prompt
      the chosen method needs ("mt" -> engineId, "ai" -> aiPromptId)
    - Build requests never skip untranslated strings and files together, and never
      combine a positive exportWithMinApprovalsCount with exportStringsThatPassedWorkflow
    - PseudoBuildProjectRequest keeps lengthTransformation within -50..100
    - UploadTranslationsRequest targets a file or a branch, not both

Design Decisions:
    - BuildProjectRequest and PseudoBuildProjectRequest share BuildProjectTranslationRequest
      so the build endpoint accepts either (ADR: validate-self capability)
    - LanguageReportSkipped keeps the API's snake_case keys as explicit aliases
"""

from pydantic import Field

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


# ─── Pre-translation ─────────────────────────────────────────────

class PreTranslationAttributes(CrowdinModel):
    language_ids: list[str] = []
    branch_ids: list[int] | None = None
    file_ids: list[int] | None = None
    method: str | None = None
    auto_approve_option: str | None = None
    duplicate_translations: bool | None = None
    skip_approved_translations: bool | None = None
    translate_untranslated_only: bool | None = None
    translate_with_perfect_match_only: bool | None = None


class PreTranslation(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: PreTranslationAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str | None = None
    finished_at: str | None = None


PreTranslationsResponse = DataResponse[PreTranslation]
PreTranslationsListResponse = ListResponse[PreTranslation]


class LanguageReportStatistics(CrowdinModel):
    phrases: int = 0
    words: int = 0


class LanguageReportFile(CrowdinModel):
    id: str = ""
    statistics: LanguageReportStatistics | None = None


class LanguageReportSkipped(CrowdinModel):
    translation_eq_source: int = Field(default=0, alias="translation_eq_source")
    qa_check: int = Field(default=0, alias="qa_check")
    hidden_strings: int = Field(default=0, alias="hidden_strings")
    ai_error: int = Field(default=0, alias="ai_error")


class LanguageReportSkippedQaCheckCategories(CrowdinModel):
    duplicate: int = 0
    spellcheck: int = 0


class LanguageReport(CrowdinModel):
    id: str = ""
    files: list[LanguageReportFile | None] = []
    skipped: LanguageReportSkipped | None = None
    skipped_qa_check_categories: LanguageReportSkippedQaCheckCategories | None = None


class PreTranslationReport(CrowdinModel):
    languages: list[LanguageReport | None] = []
    pre_translate_type: str = ""


PreTranslationReportResponse = DataResponse[PreTranslationReport]


class PreTranslationRequest(Request):
    """method: "tm", "mt" or "ai"; fallbackLanguages maps a target to its fallbacks."""
    language_ids: list[str] = []
    file_ids: list[int] = []
    method: str | None = None
    engine_id: int | None = None
    ai_prompt_id: int | None = None
    auto_approve_option: str | None = None
    duplicate_translations: bool | None = None
    skip_approved_translations: bool | None = None
    translate_untranslated_only: bool | None = None
    translate_with_perfect_match_only: bool | None = None
    fallback_languages: dict[str, list[str]] | None = None
    label_ids: list[int] | None = None
    exclude_label_ids: list[int] | None = None

    def validate(self) -> None:
        if not self.language_ids:
            raise RequestValidationError("languageIds is required")
        if not self.file_ids:
            raise RequestValidationError("fileIds is required")
        if self.method == "ai" and not self.ai_prompt_id:
            raise RequestValidationError("aiPromptId is required")
        if self.method == "mt" and not self.engine_id:
            raise RequestValidationError("engineId is required")


# ─── Build rules ─────────────────────────────────────────────────

def _check_export_flags(req, quote: str = "") -> None:
    # quote wraps field names in backticks for the project-level build messages
    def name(field: str) -> str:
        return f"{quote}{field}{quote}"

    if req.skip_untranslated_strings and req.skip_untranslated_files:
        raise RequestValidationError(
            f"{name('skipUntranslatedStrings')} and {name('skipUntranslatedFiles')} "
            "must not be true at the same request"
        )
    if (req.export_with_min_approvals_count or 0) > 0 and req.export_strings_that_passed_workflow:
        raise RequestValidationError(
            f"{name('exportWithMinApprovalsCount')} and {name('exportStringsThatPassedWorkflow')} "
            "must not be true at the same request"
        )


class BuildProjectDirectoryTranslationRequest(Request):
    target_language_ids: list[str] | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    preserve_folder_hierarchy: bool | None = None
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None

    def validate(self) -> None:
        _check_export_flags(self)


class BuildProjectDirectoryTranslation(CrowdinModel):
    id: int = 0
    project_id: int = 0
    status: str = ""
    progress: int = 0
    created_at: str = ""
    updated_at: str = ""
    finished_at: str | None = None


BuildProjectDirectoryTranslationResponse = DataResponse[BuildProjectDirectoryTranslation]


class BuildProjectFileTranslationRequest(Request):
    target_language_id: str = ""
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None

    def validate(self) -> None:
        if not self.target_language_id:
            raise RequestValidationError("targetLanguageId is required")
        _check_export_flags(self)


# ─── Project builds ──────────────────────────────────────────────

class TranslationsBuildsListOptions(ListOptions):
    branch_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.branch_id > 0:
            params["branchId"] = str(self.branch_id)
        return params


class BuildAttributes(CrowdinModel):
    """Build settings echoed back; regular and pseudo builds share this shape."""
    branch_id: int | None = None
    directory_id: int | None = None
    target_language_ids: list[str] | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None
    pseudo: bool | None = None
    prefix: str | None = None
    suffix: str | None = None
    length_transformation: int | None = None
    char_transformation: str | None = None


class TranslationsProjectBuild(CrowdinModel):
    id: int = 0
    project_id: int = 0
    status: str = ""
    progress: int = 0
    created_at: str = ""
    updated_at: str = ""
    finished_at: str | None = None
    attributes: BuildAttributes | None = None


TranslationsProjectBuildResponse = DataResponse[TranslationsProjectBuild]
TranslationsProjectBuildsListResponse = ListResponse[TranslationsProjectBuild]


class BuildProjectTranslationRequest(Request):
    """Body accepted by the project build endpoint."""


class BuildProjectRequest(BuildProjectTranslationRequest):
    branch_id: int | None = None
    target_language_ids: list[str] | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None

    def validate(self) -> None:
        _check_export_flags(self, quote="`")


class PseudoBuildProjectRequest(BuildProjectTranslationRequest):
    pseudo: bool | None = None
    branch_id: int | None = None
    prefix: str | None = None
    suffix: str | None = None
    length_transformation: int | None = None
    char_transformation: str | None = None

    def validate(self) -> None:
        if self.length_transformation is not None and not -50 <= self.length_transformation <= 100:
            raise RequestValidationError("lengthTransformation must be from -50 to 100")


# ─── Upload / export ─────────────────────────────────────────────

class UploadTranslationsRequest(Request):
    storage_id: int = 0
    file_id: int | None = None
    branch_id: int | None = None
    import_eq_suggestions: bool | None = None
    auto_approve_imported: bool | None = None
    translate_hidden: bool | None = None
    add_to_tm: bool | None = None

    def validate(self) -> None:
        if self.storage_id == 0:
            raise RequestValidationError("storageId is required")
        if (self.file_id or 0) > 0 and (self.branch_id or 0) > 0:
            raise RequestValidationError("fileId and branchId can not be used at the same request")


class UploadTranslations(CrowdinModel):
    project_id: int = 0
    storage_id: int = 0
    language_id: str = ""
    file_id: int = 0


UploadTranslationsResponse = DataResponse[UploadTranslations]


class ExportTranslationRequest(Request):
    target_language_id: str = ""
    format: str | None = None
    label_ids: list[int] | None = None
    branch_ids: list[int] | None = None
    directory_ids: list[int] | None = None
    file_ids: list[int] | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None

    def validate(self) -> None:
        if not self.target_language_id:
            raise RequestValidationError("targetLanguageId is required")


class DownloadLink(CrowdinModel):
    url: str = ""
    expire_in: str = ""
    etag: str | None = None


DownloadLinkResponse = DataResponse[DownloadLink]
