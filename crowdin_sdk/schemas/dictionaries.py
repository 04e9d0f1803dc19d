"""Dictionary Schemas — per-language spellcheck dictionaries."""

from crowdin_sdk.core.encode_query import join_slice
from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse, QueryOptions


class Dictionary(CrowdinModel):
    language_id: str = ""
    words: list[str] = []


DictionaryResponse = DataResponse[Dictionary]
DictionariesListResponse = ListResponse[Dictionary]


class DictionariesListOptions(QueryOptions):
    """Language filter for listing dictionaries (the endpoint is not paginated)."""
    language_ids: list[str] = []

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.language_ids:
            params["languageIds"] = join_slice(self.language_ids)
        return params
