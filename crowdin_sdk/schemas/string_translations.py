"""String Translation Schemas — translations, approvals, votes and word alignment.

Invariants:
    - Every denormalizePlaceholders filter is a tri-state (0/1 only)
    - VoteAddRequest checks the mark before the translation id; the message
      quotes the rejected mark verbatim
"""

from enum import Enum

from crowdin_sdk.core.encode_query import join_slice, tri_state
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    QueryOptions,
    Request,
)
from crowdin_sdk.schemas.users import ShortUser


def _add_denormalize(params: dict[str, str], value: int | None) -> None:
    denormalize = tri_state(value)
    if denormalize is not None:
        params["denormalizePlaceholders"] = denormalize


# --- Approvals ----------------------------------------------------------------

class Approval(CrowdinModel):
    id: int = 0
    user: ShortUser | None = None
    translation_id: int = 0
    string_id: int = 0
    language_id: str = ""
    created_at: str = ""


ApprovalsGetResponse = DataResponse[Approval]
ApprovalsListResponse = ListResponse[Approval]


class ApprovalsListOptions(ListOptions):
    order_by: str = ""
    file_id: int = 0
    label_ids: list[int] = []
    exclude_label_ids: list[int] = []
    string_id: int = 0
    language_id: str = ""
    translation_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.file_id > 0:
            params["fileId"] = str(self.file_id)
        if self.label_ids:
            params["labelIds"] = join_slice(self.label_ids)
        if self.exclude_label_ids:
            params["excludeLabelIds"] = join_slice(self.exclude_label_ids)
        if self.string_id > 0:
            params["stringId"] = str(self.string_id)
        if self.language_id:
            params["languageId"] = self.language_id
        if self.translation_id > 0:
            params["translationId"] = str(self.translation_id)
        return params


# --- Alignment ----------------------------------------------------------------

class Alignment(CrowdinModel):
    source_word: str = ""
    source_lemma: str = ""
    target_word: str = ""
    target_lemma: str = ""
    match: int = 0
    probability: int = 0


class WordAlignment(CrowdinModel):
    text: str = ""
    alignments: list[Alignment | None] = []


class TranslationAlignment(CrowdinModel):
    words: list[WordAlignment | None] = []


TranslationAlignmentResponse = DataResponse[TranslationAlignment]


class TranslationAlignmentRequest(Request):
    source_language_id: str = ""
    target_language_id: str = ""
    text: str = ""

    def validate(self) -> None:
        if not self.source_language_id:
            raise RequestValidationError("source language ID is required")
        if not self.target_language_id:
            raise RequestValidationError("target language ID is required")
        if not self.text:
            raise RequestValidationError("text is required")


# ─── Translations ────────────────────────────────────────────────

class LanguageTranslationPlural(CrowdinModel):
    translation_id: int = 0
    text: str = ""
    plural_form: str = ""
    user: ShortUser | None = None
    created_at: str = ""


class LanguageTranslation(CrowdinModel):
    """Plain strings carry text/translationId; plural strings carry plurals instead."""
    string_id: int = 0
    content_type: str = ""
    translation_id: int | None = None
    text: str | None = None
    user: ShortUser | None = None
    created_at: str | None = None
    plurals: list[LanguageTranslationPlural | None] | None = None


LanguageTranslationsListResponse = ListResponse[LanguageTranslation]


class LanguageTranslationsListOptions(ListOptions):
    order_by: str = ""
    string_ids: list[int] = []
    label_ids: list[int] = []
    file_id: int = 0
    branch_id: int = 0
    directory_id: int = 0
    croql: str = ""
    denormalize_placeholders: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.string_ids:
            params["stringIds"] = join_slice(self.string_ids)
        if self.label_ids:
            params["labelIds"] = join_slice(self.label_ids)
        if self.file_id > 0:
            params["fileId"] = str(self.file_id)
        if self.branch_id > 0:
            params["branchId"] = str(self.branch_id)
        if self.directory_id > 0:
            params["directoryId"] = str(self.directory_id)
        if self.croql:
            params["croql"] = self.croql
        _add_denormalize(params, self.denormalize_placeholders)
        return params


class Translation(CrowdinModel):
    id: int = 0
    text: str = ""
    plural_category_name: str = ""
    user: ShortUser | None = None
    rating: int = 0
    provider: str | None = None
    is_pre_translated: bool = False
    created_at: str = ""


TranslationGetResponse = DataResponse[Translation]
TranslationsListResponse = ListResponse[Translation]


class TranslationGetOptions(QueryOptions):
    denormalize_placeholders: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        _add_denormalize(params, self.denormalize_placeholders)
        return params


class StringTranslationsListOptions(ListOptions):
    order_by: str = ""
    string_id: int = 0
    language_id: str = ""
    denormalize_placeholders: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.string_id > 0:
            params["stringId"] = str(self.string_id)
        if self.language_id:
            params["languageId"] = self.language_id
        _add_denormalize(params, self.denormalize_placeholders)
        return params


class TranslationAddRequest(Request):
    string_id: int = 0
    language_id: str = ""
    text: str = ""
    plural_category_name: str | None = None

    def validate(self) -> None:
        if self.string_id == 0:
            raise RequestValidationError("string ID is required")
        if not self.language_id:
            raise RequestValidationError("language ID is required")
        if not self.text:
            raise RequestValidationError("text is required")


# ─── Votes ───────────────────────────────────────────────────────

class VoteType(str, Enum):
    UP = "up"
    DOWN = "down"


class Vote(CrowdinModel):
    id: int = 0
    user: ShortUser | None = None
    translation_id: int = 0
    voted_at: str = ""
    mark: str = ""


VoteGetResponse = DataResponse[Vote]
VotesListResponse = ListResponse[Vote]


class VotesListOptions(ListOptions):
    string_id: int = 0
    language_id: str = ""
    translation_id: int = 0
    file_id: int = 0
    label_ids: list[int] = []
    exclude_label_ids: list[int] = []

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.string_id > 0:
            params["stringId"] = str(self.string_id)
        if self.language_id:
            params["languageId"] = self.language_id
        if self.translation_id > 0:
            params["translationId"] = str(self.translation_id)
        if self.file_id > 0:
            params["fileId"] = str(self.file_id)
        if self.label_ids:
            params["labelIds"] = join_slice(self.label_ids)
        if self.exclude_label_ids:
            params["excludeLabelIds"] = join_slice(self.exclude_label_ids)
        return params


class VoteAddRequest(Request):
    mark: str = ""
    translation_id: int = 0

    def validate(self) -> None:
        if self.mark not in (VoteType.UP, VoteType.DOWN):
            raise RequestValidationError(f'invalid vote type: "{self.mark}"')
        if self.translation_id == 0:
            raise RequestValidationError("translation ID is required")
