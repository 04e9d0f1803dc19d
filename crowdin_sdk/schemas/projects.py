"""Project Schemas — projects, file-format settings and strings-exporter settings.

Invariants:
    - hasManagerAccess and type filters are tri-states: only 0 or 1 reach the query
    - ProjectsAddFileFormatSettingsRequest checks format, then presence of settings,
      then hands over to the settings shape's own validate()
    - LanguageMapping keeps the API's snake_case keys on the wire

Design Decisions:
    - File-format settings are a closed class family under FileFormatSettings; the
      request field is SerializeAsAny so the concrete shape's keys are sent
      (ADR: validate-self capability over a loose "any + format" payload)
    - A settings mapping is built into the shape registered for its format (formats
      without a dedicated shape use CommonFileFormatSettings); undeclared keys are rejected
    - Project fields the API returns as `[]` when empty decode through EmptyListDict
"""

from typing import Annotated, Any

from pydantic import Field, SerializeAsAny, ValidationInfo, field_validator

from crowdin_sdk.core.domain_types import EmptyListDict
from crowdin_sdk.core.encode_query import tri_state
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
    resolve_variant,
)
from crowdin_sdk.schemas.languages import Language
from crowdin_sdk.schemas.workflows import WorkflowTemplateStep


class LanguageMapping(CrowdinModel):
    """Per-language placeholder overrides; wire keys are snake_case."""
    name: str = ""
    two_letters_code: str = Field("", alias="two_letters_code")
    three_letters_code: str = Field("", alias="three_letters_code")
    locale: str = ""
    locale_with_underscore: str = Field("", alias="locale_with_underscore")
    android_code: str = Field("", alias="android_code")
    osx_code: str = Field("", alias="osx_code")
    osx_locale: str = Field("", alias="osx_locale")


class NotificationSettings(CrowdinModel):
    translator_new_strings: bool | None = None
    manager_new_strings: bool | None = None
    manager_language_completed: bool | None = None


# --- Pre-translation and TM penalties -----------------------------------------

class ProjectTMPreTranslate(CrowdinModel):
    enabled: bool | None = None
    auto_approve_option: str | None = None
    minimum_match_ratio: str | None = None


class ProjectMTs(CrowdinModel):
    mt_id: int | None = None
    language_ids: list[str] | None = None


class ProjectMTPreTranslate(CrowdinModel):
    enabled: bool | None = None
    mts: list[ProjectMTs] | None = None


class ProjectAiPrompt(CrowdinModel):
    ai_prompt_id: int | None = None
    language_ids: list[str] | None = None


class ProjectAiPreTranslate(CrowdinModel):
    enabled: bool | None = None
    ai_prompts: list[ProjectAiPrompt] | None = None


class TMPriorityPenalty(CrowdinModel):
    priority: int | None = None
    penalty: int | None = None


class MonthsPenalty(CrowdinModel):
    months: int | None = None
    penalty: int | None = None


class ProjectTMPenalties(CrowdinModel):
    auto_substitution: int | None = None
    tm_priority: TMPriorityPenalty | None = None
    multiple_translations: int | None = None
    time_since_last_usage: MonthsPenalty | None = None
    time_since_last_modified: MonthsPenalty | None = None


# --- Project ------------------------------------------------------------------

class Project(CrowdinModel):
    """Project as returned by get/list; manager-only settings are absent otherwise."""
    id: int = 0
    group_id: int | None = None
    type: int = 0
    user_id: int = 0
    source_language_id: str = ""
    target_language_ids: list[str] = []
    language_access_policy: str = ""
    name: str = ""
    cname: str | None = None
    identifier: str = ""
    description: str = ""
    visibility: str = ""
    logo: str = ""
    is_external: bool | None = None
    external_type: str | None = None
    workflow_id: int | None = None
    has_crowdsourcing: bool | None = None
    public_downloads: bool = False
    created_at: str = ""
    updated_at: str = ""
    last_activity: str = ""
    source_language: Language | None = None
    target_languages: list[Language | None] = []
    web_url: str = ""
    fields: Any = None

    # Settings visible to managers.
    client_organization_id: int | None = None
    translate_duplicates: int | None = None
    tags_detection: int | None = None
    glossary_access: bool | None = None
    is_mt_allowed: bool | None = None
    task_based_access_control: bool | None = None
    hidden_strings_proofreaders_access: bool | None = None
    auto_substitution: bool | None = None
    export_translated_only: bool | None = None
    skip_untranslated_strings: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None
    auto_translate_dialects: bool | None = None
    use_global_tm: bool | None = None
    tm_context_type: str | None = None
    show_tm_suggestions_dialects: bool | None = None
    tm_approved_suggestions_only: bool | None = None
    is_suspended: bool | None = None
    qa_check_is_active: bool | None = None
    qa_approvals_count: int | None = None
    qa_check_categories: Annotated[dict[str, bool], EmptyListDict] | None = None
    qa_checks_ignorable_categories: Annotated[dict[str, bool], EmptyListDict] | None = None
    custom_qa_check_ids: list[int] | None = Field(None, alias="customQACheckIds")
    language_mapping: Annotated[dict[str, LanguageMapping], EmptyListDict] | None = None
    delayed_workflow_start: bool | None = Field(None, alias="delayedTranslations")
    notification_settings: NotificationSettings | None = None
    default_tm_id: int | None = None
    default_glossary_id: int | None = None
    assigned_tms: Annotated[dict[int, dict[str, int]], EmptyListDict] | None = None
    assigned_glossaries: list[int] | None = None
    tm_penalties: Annotated[ProjectTMPenalties, EmptyListDict] | None = None
    normalize_placeholder: bool | None = None
    tm_pre_translate: ProjectTMPreTranslate | None = None
    mt_pre_translate: ProjectMTPreTranslate | None = None
    save_meta_info_in_source: bool | None = None
    skip_untranslated_files: bool | None = None
    in_context: bool | None = None
    in_context_process_hidden_strings: bool | None = None
    in_context_pseudo_language_id: str | None = None
    in_context_pseudo_language: Language | None = None


ProjectsGetResponse = DataResponse[Project]
ProjectsListResponse = ListResponse[Project]


class ProjectsListOptions(ListOptions):
    order_by: str = ""
    user_id: int = 0
    has_manager_access: int | None = None
    type: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.user_id > 0:
            params["userId"] = str(self.user_id)
        manager_access = tri_state(self.has_manager_access)
        if manager_access is not None:
            params["hasManagerAccess"] = manager_access
        project_type = tri_state(self.type)
        if project_type is not None:
            params["type"] = project_type
        return params


class ProjectsAddRequest(Request):
    """Covers file-based, strings-based and enterprise projects; only name and
    sourceLanguageId are checked locally."""
    name: str = ""
    identifier: str | None = None
    source_language_id: str = ""
    target_language_ids: list[str] | None = None
    visibility: str | None = None
    language_access_policy: str | None = None
    cname: str | None = None
    description: str | None = None
    tags_detection: int | None = None
    is_mt_allowed: bool | None = None
    task_based_access_control: bool | None = None
    auto_substitution: bool | None = None
    auto_translate_dialects: bool | None = None
    public_downloads: bool | None = None
    hidden_strings_proofreaders_access: bool | None = None
    use_global_tm: bool | None = None
    show_tm_suggestions_dialects: bool | None = None
    tm_approved_suggestions_only: bool | None = None
    skip_untranslated_strings: bool | None = None
    export_approved_only: bool | None = None
    qa_check_is_active: bool | None = None
    qa_check_categories: dict[str, bool] | None = None
    qa_checks_ignorable_categories: dict[str, bool] | None = None
    language_mapping: dict[str, LanguageMapping] | None = None
    glossary_access: bool | None = None
    normalize_placeholder: bool | None = None
    notification_settings: NotificationSettings | None = None
    tm_context_type: str | None = None
    tm_pre_translate: ProjectTMPreTranslate | None = None
    mt_pre_translate: ProjectMTPreTranslate | None = None
    ai_pre_translate: ProjectAiPreTranslate | None = None
    assist_action_ai_prompt_id: int | None = None
    default_tm_id: int | None = None
    default_glossary_id: int | None = None
    save_meta_info_in_source: bool | None = None
    type: int | None = None
    skip_untranslated_files: bool | None = None
    in_context: bool | None = None
    in_context_process_hidden_strings: bool | None = None
    in_context_pseudo_language_id: str | None = None

    # Enterprise only.
    id: int | None = None
    template_id: int | None = None
    steps: list[WorkflowTemplateStep] | None = None
    group_id: int | None = None
    vendor_id: int | None = None
    mt_engine_id: int | None = None
    translate_duplicates: int | None = None
    delayed_workflow_start: bool | None = Field(None, alias="delayedTranslations")
    export_with_min_approvals_count: int | None = None
    export_strings_that_passed_workflow: bool | None = None
    qa_approvals_count: int | None = None
    custom_qa_check_ids: list[int] | None = Field(None, alias="customQACheckIds")
    mt_id: int | None = None
    fields: dict[str, Any] | None = None
    languages: list[str] | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.source_language_id:
            raise RequestValidationError("sourceLanguageId is required")


# ─── File format settings ────────────────────────────────────────

class ProjectsFileFormatSettings(CrowdinModel):
    id: int = 0
    name: str = ""
    format: str = ""
    extensions: list[str] = []
    settings: dict[str, Any] = {}
    created_at: str = ""
    updated_at: str = ""


ProjectsFileFormatSettingsResponse = DataResponse[ProjectsFileFormatSettings]
ProjectsFileFormatSettingsListResponse = ListResponse[ProjectsFileFormatSettings]


class FileFormatSettings(CrowdinModel):
    """Base of the settings shapes accepted per file format."""

    def validate(self) -> None:
        return None


class CommonFileFormatSettings(FileFormatSettings):
    content_segmentation: bool | None = None
    srx_storage_id: int | None = None
    export_pattern: str | None = None


class PropertyFileFormatSettings(FileFormatSettings):
    export_pattern: str | None = None
    escape_quotes: int | None = None
    escape_special_characters: int | None = None


class XMLFileFormatSettings(FileFormatSettings):
    translate_content: bool | None = None
    translate_attributes: bool | None = None
    translatable_elements: list[str] | None = None
    content_segmentation: bool | None = None
    srx_storage_id: int | None = None
    export_pattern: str | None = None


class HTMLFileFormatSettings(CommonFileFormatSettings):
    excluded_elements: list[str] | None = None


class AdocFileFormatSettings(CommonFileFormatSettings):
    exclude_include_directives: bool | None = None


class MDXV1FileFormatSettings(CommonFileFormatSettings):
    excluded_front_matter_elements: list[str] | None = None
    exclude_code_blocks: bool | None = None
    type: str | None = None


class MDXV2FileFormatSettings(CommonFileFormatSettings):
    excluded_front_matter_elements: list[str] | None = None
    exclude_code_blocks: bool | None = None


class DocxFileFormatSettings(CommonFileFormatSettings):
    clean_tags_aggressively: bool | None = None
    translate_hidden_text: bool | None = None
    translate_hyperlink_urls: bool | None = None
    translate_hidden_rows_and_columns: bool | None = None
    import_notes: bool | None = None
    import_hidden_slides: bool | None = None


class MediaWikiFileFormatSettings(FileFormatSettings):
    srx_storage_id: int | None = None
    export_pattern: str | None = None


class JSONFileFormatSettings(CommonFileFormatSettings):
    type: str | None = None


class TXTFileFormatSettings(FileFormatSettings):
    srx_storage_id: int | None = None
    export_pattern: str | None = None


class JavaScriptFileFormatSettings(FileFormatSettings):
    export_pattern: str | None = None
    export_quotes: str | None = None


class StringCatalogFileFormatSettings(FileFormatSettings):
    import_key_as_source: bool | None = None
    export_pattern: str | None = None


class OtherFileFormatSettings(FileFormatSettings):
    export_pattern: str | None = None


FILE_FORMAT_SETTINGS: dict[str, type[FileFormatSettings]] = {
    "properties": PropertyFileFormatSettings,
    "xml": XMLFileFormatSettings,
    "html": HTMLFileFormatSettings,
    "adoc": AdocFileFormatSettings,
    "mdx_v1": MDXV1FileFormatSettings,
    "mdx_v2": MDXV2FileFormatSettings,
    "docx": DocxFileFormatSettings,
    "mediawiki": MediaWikiFileFormatSettings,
    "json": JSONFileFormatSettings,
    "txt": TXTFileFormatSettings,
    "js": JavaScriptFileFormatSettings,
    "xcstrings": StringCatalogFileFormatSettings,
}


class ProjectsAddFileFormatSettingsRequest(Request):
    format: str = ""
    settings: SerializeAsAny[FileFormatSettings] | None = None

    @field_validator("settings", mode="before")
    @classmethod
    def settings_for_format(cls, v: Any, info: ValidationInfo) -> Any:
        return resolve_variant(
            v, FileFormatSettings, FILE_FORMAT_SETTINGS, info.data.get("format"),
            default=CommonFileFormatSettings,
        )

    def validate(self) -> None:
        if not self.format:
            raise RequestValidationError("format is required")
        if self.settings is None:
            raise RequestValidationError("settings is required")
        self.settings.validate()


# ─── Strings exporter settings ───────────────────────────────────

class StringsExporterSettings(CrowdinModel):
    convert_placeholders: bool | None = None
    language_pair_mapping: dict[str, str] | None = None


class ProjectsStringsExporterSettings(CrowdinModel):
    id: int = 0
    format: str = ""
    settings: StringsExporterSettings = Field(default_factory=StringsExporterSettings)
    created_at: str = ""
    updated_at: str = ""


ProjectsStringsExporterSettingsResponse = DataResponse[ProjectsStringsExporterSettings]
ProjectsStringsExporterSettingsListResponse = ListResponse[ProjectsStringsExporterSettings]


class ProjectsStringsExporterSettingsRequest(Request):
    format: str = ""
    settings: StringsExporterSettings = Field(default_factory=StringsExporterSettings)

    def validate(self) -> None:
        if not self.format:
            raise RequestValidationError("format is required")
        settings = self.settings
        if settings.convert_placeholders is None and not settings.language_pair_mapping:
            raise RequestValidationError("settings is required")
