"""String Comment Schemas — comments and issues attached to source strings."""

from crowdin_sdk.core.encode_query import join_slice
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)
from crowdin_sdk.schemas.users import User


class String(CrowdinModel):
    """Short view of the commented string."""
    id: int = 0
    text: str = ""
    type: str = ""
    context: str = ""
    file_id: int = 0


class Organization(CrowdinModel):
    id: int = 0
    domain: str = ""


class StringComment(CrowdinModel):
    """Comment or issue; issue fields are empty for plain comments."""
    id: int = 0
    text: str = ""
    user_id: int = 0
    string_id: int = 0
    user: User | None = None
    string: String | None = None
    project_id: int = 0
    language_id: str = ""
    type: str = ""
    issue_type: str = ""
    issue_status: str = ""
    resolver_id: int = 0
    resolver: User | None = None
    resolved_at: str = ""
    created_at: str = ""
    is_shared: bool | None = None
    sender_organization: Organization | None = None
    resolver_organization: Organization | None = None


StringCommentsResponse = DataResponse[StringComment]
StringCommentsListResponse = ListResponse[StringComment]


class StringCommentsListOptions(ListOptions):
    order_by: str = ""
    string_id: int = 0
    type: str = ""
    issue_type: list[str] = []
    issue_status: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.string_id != 0:
            params["stringId"] = str(self.string_id)
        if self.type:
            params["type"] = self.type
        if self.issue_type:
            params["issueType"] = join_slice(self.issue_type)
        if self.issue_status:
            params["issueStatus"] = self.issue_status
        return params


class StringCommentsAddRequest(Request):
    """type: "comment" or "issue"; issueType applies to issues only."""
    text: str = ""
    string_id: int = 0
    target_language_id: str = ""
    type: str = ""
    issue_type: str | None = None
    is_shared: bool | None = None

    def validate(self) -> None:
        if not self.text:
            raise RequestValidationError("text is required")
        if self.string_id == 0:
            raise RequestValidationError("stringId is required")
        if not self.target_language_id:
            raise RequestValidationError("targetLanguageId is required")
        if not self.type:
            raise RequestValidationError("type is required")
