"""String Correction Schemas — proofreading corrections of source strings.

Invariants:
    - denormalizePlaceholders is sent only as 0 or 1
    - StringCorrectionAddRequest requires stringId then text
"""

from crowdin_sdk.core.encode_query import tri_state
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    QueryOptions,
    Request,
)
from crowdin_sdk.schemas.users import User


class StringCorrection(CrowdinModel):
    id: int = 0
    text: str = ""
    plural_category_name: str | None = None
    user: User | None = None
    created_at: str = ""


StringCorrectionGetResponse = DataResponse[StringCorrection]
StringCorrectionsListResponse = ListResponse[StringCorrection]


class StringCorrectionsListOptions(ListOptions):
    string_id: int = 0
    order_by: str = ""
    denormalize_placeholders: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.string_id > 0:
            params["stringId"] = str(self.string_id)
        if self.order_by:
            params["orderBy"] = self.order_by
        denormalize = tri_state(self.denormalize_placeholders)
        if denormalize is not None:
            params["denormalizePlaceholders"] = denormalize
        return params


class StringCorrectionGetOptions(QueryOptions):
    denormalize_placeholders: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        denormalize = tri_state(self.denormalize_placeholders)
        if denormalize is not None:
            params["denormalizePlaceholders"] = denormalize
        return params


class StringCorrectionsDeleteOptions(QueryOptions):
    """Deletes every correction of one string."""
    string_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.string_id > 0:
            params["stringId"] = str(self.string_id)
        return params


class StringCorrectionAddRequest(Request):
    string_id: int = 0
    text: str = ""
    plural_category_name: str | None = None

    def validate(self) -> None:
        if self.string_id == 0:
            raise RequestValidationError("stringId is required")
        if not self.text:
            raise RequestValidationError("text is required")
