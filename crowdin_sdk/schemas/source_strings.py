"""Source String Schemas — source strings, string uploads and their filters.

Invariants:
    - SourceStringsAddRequest.text is a plain string or a plural-form mapping of
      strings; anything else is rejected before emptiness is checked
    - updateOption on an upload is only accepted together with updateStrings=true
"""

from typing import Any

from pydantic import Field

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


def _is_plural_text(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(key, str) and isinstance(form, str) for key, form in value.items()
    )


class SourceString(CrowdinModel):
    """text is a string, or a mapping of plural forms for plural strings."""
    id: int = 0
    project_id: int = 0
    branch_id: int | None = None
    identifier: str = ""
    text: Any = None
    type: str = ""
    context: str = ""
    max_length: int = 0
    is_hidden: bool = False
    is_duplicate: bool = False
    master_string_id: int | None = None
    label_ids: list[int] = []
    web_url: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    file_id: int = 0
    directory_id: int | None = None
    revision: int = 0
    fields: dict[str, Any] | None = None


SourceStringsGetResponse = DataResponse[SourceString]
SourceStringsListResponse = ListResponse[SourceString]


class SourceStringsListOptions(ListOptions):
    """croql cannot be combined with the label, task or filter parameters
    server-side; nothing here enforces that."""
    order_by: str = ""
    denormalize_placeholders: int | None = None
    label_ids: list[int] = []
    file_id: int = 0
    branch_id: int = 0
    directory_id: int = 0
    task_id: int = 0
    croql: str = ""
    filter: str = ""
    scope: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        denormalize = tri_state(self.denormalize_placeholders)
        if denormalize is not None:
            params["denormalizePlaceholders"] = denormalize
        if self.label_ids:
            params["labelIds"] = join_slice(self.label_ids)
        if self.file_id > 0:
            params["fileId"] = str(self.file_id)
        if self.branch_id > 0:
            params["branchId"] = str(self.branch_id)
        if self.directory_id > 0:
            params["directoryId"] = str(self.directory_id)
        if self.task_id > 0:
            params["taskId"] = str(self.task_id)
        if self.croql:
            params["croql"] = self.croql
        if self.filter:
            params["filter"] = self.filter
        if self.scope:
            params["scope"] = self.scope
        return params


class SourceStringsGetOptions(QueryOptions):
    denormalize_placeholders: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        denormalize = tri_state(self.denormalize_placeholders)
        if denormalize is not None:
            params["denormalizePlaceholders"] = denormalize
        return params


class SourceStringsAddRequest(Request):
    text: Any = None
    file_id: int = 0
    identifier: str | None = None
    context: str | None = None
    is_hidden: bool | None = None
    max_length: int | None = None
    label_ids: list[int] | None = None
    fields: dict[str, str] | None = None

    def validate(self) -> None:
        if isinstance(self.text, str):
            if not self.text:
                raise RequestValidationError("text cannot be empty")
        elif _is_plural_text(self.text):
            if not self.text:
                raise RequestValidationError("text cannot be empty")
        else:
            raise RequestValidationError("text must be a string or map of strings")
        if self.file_id == 0:
            raise RequestValidationError("fileId is required")


# --- Uploads ------------------------------------------------------------------

class SourceStringsImportOptions(CrowdinModel):
    first_line_contains_header: bool | None = None
    import_translations: bool | None = None
    scheme: dict[str, int] | None = None


class SourceStringsUploadAttributes(CrowdinModel):
    branch_id: int = 0
    storage_id: int = 0
    file_type: str = ""
    parser_version: int = 0
    label_ids: list[int] = []
    import_options: SourceStringsImportOptions = Field(default_factory=SourceStringsImportOptions)
    update_strings: bool = False
    cleanup_mode: bool = False
    update_option: str | None = None


class SourceStringsUpload(CrowdinModel):
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: SourceStringsUploadAttributes = Field(default_factory=SourceStringsUploadAttributes)
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


SourceStringsUploadResponse = DataResponse[SourceStringsUpload]


class SourceStringsUploadRequest(Request):
    storage_id: int = 0
    branch_id: int = 0
    type: str | None = None
    parser_version: int | None = None
    label_ids: list[int] | None = None
    update_strings: bool | None = None
    cleanup_mode: bool | None = None
    import_options: SourceStringsImportOptions | None = None
    update_option: str | None = None

    def validate(self) -> None:
        if self.storage_id == 0:
            raise RequestValidationError("storageId is required")
        if self.branch_id == 0:
            raise RequestValidationError("branchId is required")
        if self.update_option and self.update_strings is not True:
            raise RequestValidationError("updateStrings must be set to true to use updateOption")
