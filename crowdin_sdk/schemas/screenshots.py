"""Screenshot Schemas — screenshots, string tags and auto-tagging.

Invariants:
    - ScreenshotListOptions rejects stringId together with stringIds
    - Add and auto-tag requests check fileId and branchId pairwise against the
      other two targets; directoryId alone is allowed
    - Tag requests require a positive stringId
"""

from pydantic import Field

from crowdin_sdk.core.encode_query import join_slice
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)

TARGET_CONFLICT = "must use either branchId, fileId, or directoryId"


def _check_single_target(req) -> None:
    file_id = req.file_id or 0
    branch_id = req.branch_id or 0
    directory_id = req.directory_id or 0
    if file_id > 0 and (branch_id > 0 or directory_id > 0):
        raise RequestValidationError(TARGET_CONFLICT)
    if branch_id > 0 and (file_id > 0 or directory_id > 0):
        raise RequestValidationError(TARGET_CONFLICT)


class TagPosition(CrowdinModel):
    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None


class Tag(CrowdinModel):
    id: int = 0
    screenshot_id: int = 0
    string_id: int = 0
    position: TagPosition | None = None
    created_at: str = ""


TagResponse = DataResponse[Tag]
TagListResponse = ListResponse[Tag]


class ScreenshotSize(CrowdinModel):
    width: int = 0
    height: int = 0


class Screenshot(CrowdinModel):
    id: int = 0
    user_id: int = 0
    web_url: str = ""
    name: str = ""
    size: ScreenshotSize = Field(default_factory=ScreenshotSize)
    tags_count: int = 0
    tags: list[Tag | None] = []
    label_ids: list[int] = []
    created_at: str = ""
    updated_at: str = ""


ScreenshotResponse = DataResponse[Screenshot]
ScreenshotListResponse = ListResponse[Screenshot]


class ScreenshotListOptions(ListOptions):
    """string_id is deprecated in favour of string_ids; the two are exclusive."""
    order_by: str = ""
    string_id: int = 0
    string_ids: list[str] = []
    label_ids: list[str] = []
    exclude_label_ids: list[str] = []

    def validate(self) -> None:
        if self.string_id > 0 and self.string_ids:
            raise RequestValidationError("stringId and stringIds cannot be used in the same request")

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.string_id > 0:
            params["stringId"] = str(self.string_id)
        if self.string_ids:
            params["stringIds"] = join_slice(self.string_ids)
        if self.label_ids:
            params["labelIds"] = join_slice(self.label_ids)
        if self.exclude_label_ids:
            params["excludeLabelIds"] = join_slice(self.exclude_label_ids)
        return params


class ScreenshotAddRequest(Request):
    storage_id: int = 0
    name: str = ""
    auto_tag: bool | None = None
    file_id: int | None = None
    branch_id: int | None = None
    directory_id: int | None = None
    label_ids: list[int] | None = None

    def validate(self) -> None:
        if self.storage_id <= 0:
            raise RequestValidationError("storageId is required")
        if not self.name:
            raise RequestValidationError("name is required")
        _check_single_target(self)


class ScreenshotUpdateRequest(Request):
    storage_id: int = 0
    name: str = ""

    def validate(self) -> None:
        if self.storage_id <= 0:
            raise RequestValidationError("storageId is required")
        if not self.name:
            raise RequestValidationError("name is required")


# --- Tags ---------------------------------------------------------------------

class TagAddRequest(Request):
    string_id: int = 0
    position: TagPosition | None = None

    def validate(self) -> None:
        if self.string_id <= 0:
            raise RequestValidationError("stringId is required")


class ReplaceTagsRequest(TagAddRequest):
    """One tag of a full replacement list; each entry validates on its own."""


class AutoTagRequest(Request):
    auto_tag: bool | None = None
    file_id: int | None = None
    branch_id: int | None = None
    directory_id: int | None = None

    def validate(self) -> None:
        if self.auto_tag is None:
            raise RequestValidationError("autoTag is required")
        _check_single_target(self)
