"""Translation Status Schemas — translation progress and QA check issues.

Invariants:
    - Filter lists (languages, categories, validations) are sent comma-joined
"""

from crowdin_sdk.core.encode_query import join_slice
from crowdin_sdk.schemas.base import CrowdinModel, ListOptions, ListResponse
from crowdin_sdk.schemas.languages import Language


class TranslationProgress(CrowdinModel):
    """Progress of a branch, directory, file or language."""
    words: dict[str, int] = {}
    phrases: dict[str, int] = {}
    translation_progress: int = 0
    approval_progress: int = 0
    language_id: str | None = None
    branch_id: int | None = None
    file_id: int | None = None
    language: Language | None = None
    etag: str | None = None


TranslationProgressResponse = ListResponse[TranslationProgress]


class ProjectProgressListOptions(ListOptions):
    language_ids: list[str] = []

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.language_ids:
            params["languageIds"] = join_slice(self.language_ids)
        return params


class QACheck(CrowdinModel):
    string_id: int = 0
    language_id: str = ""
    category: str = ""
    category_description: str = ""
    validation: str = ""
    validation_description: str = ""
    plural_id: int = 0
    text: str = ""


QAChecksResponse = ListResponse[QACheck]


class QACheckListOptions(ListOptions):
    category: list[str] = []
    validation: list[str] = []
    language_ids: list[str] = []

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.category:
            params["category"] = join_slice(self.category)
        if self.validation:
            params["validation"] = join_slice(self.validation)
        if self.language_ids:
            params["languageIds"] = join_slice(self.language_ids)
        return params
