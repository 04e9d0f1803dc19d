"""Group Schemas — Enterprise project groups."""

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class Group(CrowdinModel):
    id: int = 0
    name: str = ""
    description: str = ""
    parent_id: int = 0
    organization_id: int = 0
    user_id: int = 0
    subgroups_count: int = 0
    projects_count: int = 0
    created_at: str = ""
    updated_at: str = ""


GroupsGetResponse = DataResponse[Group]
GroupsListResponse = ListResponse[Group]


class GroupsListOptions(ListOptions):
    """parent_id=0 lists root groups; None lists every group."""
    parent_id: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.parent_id is not None:
            params["parentId"] = str(self.parent_id)
        return params


class GroupsAddRequest(Request):
    name: str = ""
    parent_id: int | None = None
    description: str | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
