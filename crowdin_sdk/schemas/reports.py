"""Report Schemas — report generation, archives and settings templates.

Invariants:
    - Generate requests check name, then presence of the schema, then the schema's
      own validate(); project and group schemas are separate families
    - ContributionRawDataSchema requires mode; the group post-editing cost schema
      requires baseRates, individualRates and netRateSchemes in that order
    - The API key `schema` is held as `report_schema` (BaseModel.schema is reserved)

Design Decisions:
    - Schemas are subclasses of ReportSchema / ReportGroupSchema serialized via
      SerializeAsAny, so the outer request never needs to know the concrete shape
      (ADR: validate-self capability keyed by report name)
    - A plain mapping given as schema is built into the shape registered for the
      report name; keys that shape does not declare are rejected, never dropped
"""

from enum import Enum
from typing import Any

from pydantic import Field, SerializeAsAny, ValidationInfo, field_validator

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
    resolve_variant,
)


class ReportFormat(str, Enum):
    XLSX = "xlsx"
    CSV = "csv"
    JSON = "json"


class ReportScopeType(str, Enum):
    PROJECT = "project"
    ORGANIZATION = "organization"
    GROUP = "group"


class ReportUnit(str, Enum):
    STRINGS = "strings"
    WORDS = "words"
    CHARS = "chars"
    CHARS_WITH_SPACES = "chars_with_spaces"


class ReportMode(str, Enum):
    TRANSLATIONS = "translations"
    APPROVALS = "approvals"
    VOTES = "votes"


class ReportName(str, Enum):
    COSTS_ESTIMATION_POST_EDITING = "costs-estimation-pe"
    TRANSACTION_COSTS_POST_EDITING = "translation-costs-pe"
    CONTRIBUTION_RAW_DATA = "contribution-raw-data"
    TOP_MEMBERS = "top-members"
    GROUP_TRANSLATION_COSTS_POST_EDITING = "group-translation-costs-pe"
    GROUP_TOP_MEMBERS = "group-top-members"


class ReportCurrency(str, Enum):
    """Currencies accepted by cost reports and settings templates."""
    USD = "USD"
    EUR = "EUR"
    JPY = "JPY"
    GBP = "GBP"
    AUD = "AUD"
    CAD = "CAD"
    CHF = "CHF"
    CNY = "CNY"
    SEK = "SEK"
    NZD = "NZD"
    MXN = "MXN"
    SGD = "SGD"
    HKD = "HKD"
    NOK = "NOK"
    KRW = "KRW"
    TRY = "TRY"
    RUB = "RUB"
    INR = "INR"
    BRL = "BRL"
    ZAR = "ZAR"
    GEL = "GEL"
    UAH = "UAH"


# --- Archives and status ------------------------------------------------------

class ReportArchive(CrowdinModel):
    id: int = 0
    scope_type: str = ""
    scope_id: int = 0
    user_id: int = 0
    name: str = ""
    web_url: str = ""
    scheme: Any = None
    created_at: str = ""


ReportArchiveResponse = DataResponse[ReportArchive]
ReportArchiveListResponse = ListResponse[ReportArchive]


class ReportArchivesListOptions(ListOptions):
    scope_type: str = ""
    scope_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.scope_type:
            params["scopeType"] = self.scope_type
        if self.scope_id != 0:
            params["scopeId"] = str(self.scope_id)
        return params


class ReportStatusAttributes(CrowdinModel):
    format: str = ""
    report_name: str = ""
    report_schema: Any = Field(None, alias="schema")


class ReportStatus(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: ReportStatusAttributes = Field(default_factory=ReportStatusAttributes)
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


ReportStatusResponse = DataResponse[ReportStatus]


class ExportReportArchiveRequest(Request):
    format: str | None = None


# --- Rates --------------------------------------------------------------------

class ReportBaseRates(CrowdinModel):
    full_translation: float | None = None
    proofread: float | None = None


class ReportIndividualRates(CrowdinModel):
    language_ids: list[str] | None = None
    user_ids: list[int] | None = None
    full_translation: float | None = None
    proofread: float | None = None


class ReportNetRateSchemeMatch(CrowdinModel):
    match_type: str | None = None
    price: float | None = None


class ReportNetRateSchemes(CrowdinModel):
    tm_match: list[ReportNetRateSchemeMatch] | None = None
    mt_match: list[ReportNetRateSchemeMatch] | None = None
    suggestion_match: list[ReportNetRateSchemeMatch] | None = None


# ─── Project report schemas ──────────────────────────────────────

class ReportSchema(CrowdinModel):
    """Base of the project-level report schemas."""

    def validate(self) -> None:
        return None


class CostsEstimationPostEditingSchema(ReportSchema):
    unit: str | None = None
    currency: str | None = None
    format: str | None = None
    base_rates: ReportBaseRates | None = None
    individual_rates: list[ReportIndividualRates] | None = None
    net_rate_schemes: ReportNetRateSchemes | None = None
    calculate_internal_matches: bool | None = None
    include_pre_translated_strings: bool | None = None
    language_id: str | None = None
    file_ids: list[int] | None = None
    directory_ids: list[int] | None = None
    branch_ids: list[int] | None = None
    label_ids: list[int] | None = None
    label_include_type: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    task_id: int | None = None


class TransactionCostsPostEditingSchema(ReportSchema):
    unit: str | None = None
    currency: str | None = None
    format: str | None = None
    base_rates: ReportBaseRates | None = None
    individual_rates: list[ReportIndividualRates] | None = None
    net_rate_schemes: ReportNetRateSchemes | None = None
    exclude_approvals_for_edited_translations: bool | None = None
    group_by: str | None = None
    language_id: str | None = None
    user_ids: list[int] | None = None
    file_ids: list[int] | None = None
    directory_ids: list[int] | None = None
    branch_ids: list[int] | None = None
    label_ids: list[int] | None = None
    label_include_type: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    task_id: int | None = None


class TopMembersSchema(ReportSchema):
    unit: str | None = None
    language_id: str | None = None
    format: str | None = None
    date_from: str | None = None
    date_to: str | None = None


class ContributionRawDataSchema(ReportSchema):
    mode: str = ""
    unit: str | None = None
    task_id: int | None = None
    language_id: str | None = None
    user_id: str | None = None
    columns: list[str] | None = None
    tm_ids: list[int] | None = None
    mt_ids: list[int] | None = None
    file_ids: list[int] | None = None
    directory_ids: list[int] | None = None
    branch_ids: list[int] | None = None
    date_from: str | None = None
    date_to: str | None = None

    def validate(self) -> None:
        if not self.mode:
            raise RequestValidationError("mode is required")


PROJECT_REPORT_SCHEMAS: dict[str, type[ReportSchema]] = {
    ReportName.COSTS_ESTIMATION_POST_EDITING.value: CostsEstimationPostEditingSchema,
    ReportName.TRANSACTION_COSTS_POST_EDITING.value: TransactionCostsPostEditingSchema,
    ReportName.TOP_MEMBERS.value: TopMembersSchema,
    ReportName.CONTRIBUTION_RAW_DATA.value: ContributionRawDataSchema,
}


class ReportGenerateRequest(Request):
    name: str = ""
    report_schema: SerializeAsAny[ReportSchema] | None = Field(None, alias="schema")

    @field_validator("report_schema", mode="before")
    @classmethod
    def schema_for_report(cls, v: Any, info: ValidationInfo) -> Any:
        return resolve_variant(v, ReportSchema, PROJECT_REPORT_SCHEMAS, info.data.get("name"))

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if self.report_schema is None:
            raise RequestValidationError("schema is required")
        self.report_schema.validate()


# ─── Group report schemas ────────────────────────────────────────

class ReportGroupSchema(CrowdinModel):
    """Base of the group and organization report schemas."""

    def validate(self) -> None:
        return None


class GroupTransactionCostsPostEditingSchema(ReportGroupSchema):
    project_ids: list[int] | None = None
    unit: str | None = None
    currency: str | None = None
    format: str | None = None
    base_rates: ReportBaseRates | None = None
    individual_rates: list[ReportIndividualRates] | None = None
    net_rate_schemes: ReportNetRateSchemes | None = None
    exclude_approvals_for_edited_translations: bool | None = None
    group_by: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    user_ids: list[int] | None = None

    def validate(self) -> None:
        if self.base_rates is None:
            raise RequestValidationError("baseRates is required")
        # An empty list counts as present.
        if self.individual_rates is None:
            raise RequestValidationError("individualRates is required")
        if self.net_rate_schemes is None:
            raise RequestValidationError("netRateSchemes is required")


class GroupTopMembersSchema(ReportGroupSchema):
    project_ids: list[int] | None = None
    unit: str | None = None
    language_id: str | None = None
    format: str | None = None
    date_from: str | None = None
    date_to: str | None = None


GROUP_REPORT_SCHEMAS: dict[str, type[ReportGroupSchema]] = {
    ReportName.GROUP_TRANSLATION_COSTS_POST_EDITING.value: GroupTransactionCostsPostEditingSchema,
    ReportName.GROUP_TOP_MEMBERS.value: GroupTopMembersSchema,
}


class GroupReportGenerateRequest(Request):
    name: str = ""
    report_schema: SerializeAsAny[ReportGroupSchema] | None = Field(None, alias="schema")

    @field_validator("report_schema", mode="before")
    @classmethod
    def schema_for_report(cls, v: Any, info: ValidationInfo) -> Any:
        return resolve_variant(v, ReportGroupSchema, GROUP_REPORT_SCHEMAS, info.data.get("name"))

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if self.report_schema is None:
            raise RequestValidationError("schema is required")
        self.report_schema.validate()


# ─── Settings templates ──────────────────────────────────────────

class ReportSettingsTemplateConfig(CrowdinModel):
    base_rates: ReportBaseRates | None = None
    individual_rates: list[ReportIndividualRates] | None = None
    net_rate_schemes: ReportNetRateSchemes | None = None


class ReportSettingsTemplate(CrowdinModel):
    id: int = 0
    name: str = ""
    currency: str = ""
    unit: str = ""
    config: ReportSettingsTemplateConfig = Field(default_factory=ReportSettingsTemplateConfig)
    created_at: str = ""
    updated_at: str = ""
    is_public: bool = False
    is_global: bool | None = None
    project_id: int | None = None
    group_id: int | None = None


ReportSettingsTemplateResponse = DataResponse[ReportSettingsTemplate]
ReportSettingsTemplateListResponse = ListResponse[ReportSettingsTemplate]


class ReportSettingsTemplatesListOptions(ListOptions):
    project_id: int = 0
    group_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.project_id != 0:
            params["projectId"] = str(self.project_id)
        if self.group_id != 0:
            params["groupId"] = str(self.group_id)
        return params


class ReportSettingsTemplateAddRequest(Request):
    name: str = ""
    currency: str = ""
    unit: str = ""
    config: ReportSettingsTemplateConfig | None = None
    is_public: bool | None = None
    is_global: bool | None = None
    project_id: int | None = None
    group_id: int | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.currency:
            raise RequestValidationError("currency is required")
        if not self.unit:
            raise RequestValidationError("unit is required")
        if self.config is None:
            raise RequestValidationError("config is required")
        config = self.config
        if config.base_rates is None or not config.individual_rates or config.net_rate_schemes is None:
            raise RequestValidationError("config fields are required")
