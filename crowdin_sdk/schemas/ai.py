"""AI Schemas — prompts, providers, fine-tuning datasets/jobs and proxy completions.

Invariants:
    - PromptAddRequest checks name, action, aiProviderId, aiModelId, config.mode in order
    - ProviderAddRequest requires name and type
    - A fine-tuning dataset needs project ids or TM ids; a job needs training options
"""

from enum import Enum

from pydantic import ConfigDict, Field

from crowdin_sdk.core.encode_query import join_slice
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class PromptAction(str, Enum):
    PRE_TRANSLATE = "pre_translate"
    ASSIST = "assist"


class PromptMode(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"


class ProviderType(str, Enum):
    OPEN_AI = "open_ai"
    AZURE_OPEN_AI = "azure_open_ai"
    GOOGLE_GEMINI = "google_gemini"
    MISTRAL_AI = "mistral_ai"
    ANTHROPIC = "anthropic"
    CUSTOM_AI = "custom_ai"


# ─── Fine-tuning datasets ────────────────────────────────────────

class FineTuningDatasetAttributes(Request):
    """Dataset source selection; doubles as the dataset generation request."""
    project_ids: list[int] | None = None
    tm_ids: list[int] | None = None
    purpose: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    max_file_size: int | None = None
    min_examples_count: int | None = None
    max_examples_count: int | None = None

    def validate(self) -> None:
        if not self.project_ids and not self.tm_ids:
            raise RequestValidationError("projectIds or tmIds are required")


class FineTuningDataset(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: FineTuningDatasetAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


FineTuningDatasetResponse = DataResponse[FineTuningDataset]


class FineTuningEventData(CrowdinModel):
    step: int = 0
    total_steps: int = 0
    training_loss: float = 0.0
    validation_loss: float = 0.0
    full_validation_loss: float = 0.0


class FineTuningEvent(CrowdinModel):
    """type: "message" or "metrics"."""
    id: str = ""
    type: str = ""
    message: str = ""
    data: FineTuningEventData | None = None
    created_at: str = ""


FineTuningEventsListResponse = ListResponse[FineTuningEvent]


# ─── Fine-tuning jobs ────────────────────────────────────────────

class FineTuningJobHyperparameters(CrowdinModel):
    batch_size: int | None = None
    learning_rate_multiplier: float | None = None
    n_epochs: int | None = None


class FineTuningJobOptions(CrowdinModel):
    project_ids: list[int] | None = None
    tm_ids: list[int] | None = None
    date_from: str | None = None
    date_to: str | None = None
    max_file_size: int | None = None
    min_examples_count: int | None = None
    max_examples_count: int | None = None


class FineTuningJobMetadata(CrowdinModel):
    cost: float = 0.0
    cost_currency: str = ""


class FineTuningJobAttributes(CrowdinModel):
    dry_run: bool = False
    ai_prompt_id: int = 0
    hyperparameters: FineTuningJobHyperparameters | None = None
    training_options: FineTuningJobOptions | None = None
    validation_options: FineTuningJobOptions | None = None
    base_model: str = ""
    fine_tuned_model: str = ""
    trained_tokens_count: int = 0
    training_dataset_url: str = ""
    validation_dataset_url: str = ""
    metadata: FineTuningJobMetadata | None = None


class FineTuningJob(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: FineTuningJobAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


FineTuningJobResponse = DataResponse[FineTuningJob]
FineTuningJobsListResponse = ListResponse[FineTuningJob]


class FineTuningJobsListOptions(ListOptions):
    statuses: list[str] = []
    order_by: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.statuses:
            params["statuses"] = join_slice(self.statuses)
        if self.order_by:
            params["orderBy"] = self.order_by
        return params


class FineTuningJobCreateRequest(Request):
    training_options: FineTuningJobOptions | None = None
    validation_options: FineTuningJobOptions | None = None
    hyperparameters: FineTuningJobHyperparameters | None = None
    dry_run: bool | None = None

    def validate(self) -> None:
        if self.training_options is None:
            raise RequestValidationError("trainingOptions is required")


# ─── Prompts ─────────────────────────────────────────────────────

class OtherLanguageTranslations(CrowdinModel):
    is_enabled: bool | None = None
    language_ids: list[str] | None = None


class PromptConfig(CrowdinModel):
    """Basic mode toggles context sources; advanced mode sends a raw prompt."""
    mode: str = ""
    company_description: str | None = None
    project_description: str | None = None
    audience_description: str | None = None
    other_language_translations: OtherLanguageTranslations | None = None
    glossary_terms: bool | None = None
    tm_suggestions: bool | None = None
    file_content: bool | None = None
    file_context: bool | None = None
    public_project_description: bool | None = None
    siblings_strings: bool | None = None
    filtered_strings: bool | None = None
    prompt: str | None = None


class Prompt(CrowdinModel):
    id: int = 0
    name: str = ""
    action: str = ""
    ai_provider_id: int = 0
    ai_model_id: str = ""
    is_enabled: bool = False
    enabled_project_ids: list[int] = []
    config: PromptConfig = Field(default_factory=PromptConfig)
    created_at: str = ""
    updated_at: str = ""


PromptResponse = DataResponse[Prompt]
PromptsListResponse = ListResponse[Prompt]


class AIPromptsListOptions(ListOptions):
    project_id: int = 0
    action: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.project_id > 0:
            params["projectId"] = str(self.project_id)
        if self.action:
            params["action"] = self.action
        return params


class PromptAddRequest(Request):
    name: str = ""
    action: str = ""
    ai_provider_id: int = 0
    ai_model_id: str = ""
    is_enabled: bool | None = None
    enabled_project_ids: list[int] | None = None
    config: PromptConfig = Field(default_factory=PromptConfig)

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.action:
            raise RequestValidationError("action is required")
        if self.ai_provider_id == 0:
            raise RequestValidationError("aiProviderId is required")
        if not self.ai_model_id:
            raise RequestValidationError("aiModelId is required")
        if not self.config.mode:
            raise RequestValidationError("config.mode is required")


# ─── Providers ───────────────────────────────────────────────────

class ActionRule(CrowdinModel):
    action: str = ""
    available_ai_model_ids: list[str] = []


class ProviderConfig(CrowdinModel):
    action_rules: list[ActionRule] = []


class Provider(CrowdinModel):
    id: int = 0
    name: str = ""
    type: str = ""
    credentials: dict[str, str] = {}
    config: ProviderConfig = Field(default_factory=ProviderConfig)
    is_enabled: bool = False
    use_system_credentials: bool = False
    created_at: str = ""
    updated_at: str = ""


ProviderResponse = DataResponse[Provider]
ProvidersListResponse = ListResponse[Provider]


class ProviderAddRequest(Request):
    name: str = ""
    type: str = ""
    credentials: dict[str, str] | None = None
    config: ProviderConfig | None = None
    is_enabled: bool | None = None
    use_system_credentials: bool | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.type:
            raise RequestValidationError("type is required")


class ProviderModel(CrowdinModel):
    id: str = ""


ProviderModelResponse = DataResponse[ProviderModel]
ProviderModelsListResponse = ListResponse[ProviderModel]


# ─── Proxy chat completions ──────────────────────────────────────

class ProxyChatCompletion(CrowdinModel):
    """Opaque completion body; the provider's response is passed through."""
    model_config = ConfigDict(extra="allow")


ProxyChatCompletionResponse = DataResponse[ProxyChatCompletion]


class CreateProxyChatCompletionRequest(Request):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str | None = None
    stream: bool | None = None
