"""Machine Translation Engine Schemas — MT engines and ad-hoc string translation.

Invariants:
    - MTListOptions.group_id=0 is sent; None is omitted
    - MTAddRequest requires name, type and a credentials object
    - TranslateRequest needs a target language and either a source language or a
      recognition provider ("crowdin" or "engine")
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


class LanguageRecognitionProvider(str, Enum):
    CROWDIN = "crowdin"
    ENGINE = "engine"


class MachineTranslationCredentials(CrowdinModel):
    crowdin_nmt: str = Field(default="", alias="crowdin_nmt")
    crowdin_nmt_multi_translations: str = Field(
        default="", alias="crowdin_nmt_multi_translations",
    )


class MachineTranslation(CrowdinModel):
    """Machine translation engine."""
    id: int = 0
    name: str = ""
    type: str = ""
    credentials: MachineTranslationCredentials = Field(
        default_factory=MachineTranslationCredentials,
    )
    supported_language_ids: list[str] = []
    supported_language_pairs: dict[str, list[str]] = {}
    group_id: int | None = None
    enabled_language_ids: list[str] | None = None
    enabled_project_ids: list[int] | None = None
    project_ids: list[int] | None = None
    is_enabled: bool | None = None


MachineTranslationsResponse = DataResponse[MachineTranslation]
MachineTranslationsListResponse = ListResponse[MachineTranslation]


class MTListOptions(ListOptions):
    group_id: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.group_id is not None:
            params["groupId"] = str(self.group_id)
        return params


class MTECredentials(CrowdinModel):
    """Engine-specific credentials; only the keys the engine type needs are sent."""
    api_key: str | None = None
    credentials: str | None = None
    model: str | None = None
    is_system_credentials: bool | None = None
    endpoint: str | None = None
    access_key: str | None = None
    secret_key: str | None = None
    url: str | None = None


class MTAddRequest(Request):
    name: str = ""
    type: str = ""
    credentials: MTECredentials | None = None
    group_id: int | None = None
    enabled_language_ids: list[str] | None = None
    enabled_project_ids: list[int] | None = None
    is_enabled: bool | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.type:
            raise RequestValidationError("type is required")
        if self.credentials is None:
            raise RequestValidationError("credentials are required")


# --- Translate ----------------------------------------------------------------

class TranslateRequest(Request):
    source_language_id: str | None = None
    target_language_id: str = ""
    language_recognition_provider: str | None = None
    strings: list[str] = []

    def validate(self) -> None:
        if not self.target_language_id:
            raise RequestValidationError("target language ID is required")
        if not self.language_recognition_provider and not self.source_language_id:
            raise RequestValidationError(
                "source language ID or language recognition provider is required"
            )
        if self.language_recognition_provider and self.language_recognition_provider not in (
            LanguageRecognitionProvider.CROWDIN.value,
            LanguageRecognitionProvider.ENGINE.value,
        ):
            raise RequestValidationError("invalid language recognition provider")


class MTTranslation(CrowdinModel):
    source_language_id: str = ""
    target_language_id: str = ""
    strings: list[str] = []
    translations: list[str] = []


MTTranslationResponse = DataResponse[MTTranslation]
